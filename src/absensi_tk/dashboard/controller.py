from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.http import api_view
from ..container import Container


def register(app: Flask, container: Container) -> None:
    api = api_view(app, container)
    api_no_load = api_view(app, container, load_state=False)

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api
    def dashboard():
        return jsonify(container.dashboard_service.summary(today_local()).as_dict())

    @app.route("/api/sync", methods=["POST"], endpoint="sync")
    @api_no_load
    def sync():
        state = container.sync_service.sync()
        return jsonify(
            {
                "success": True,
                "message": "Database berhasil diperbarui.",
                "classes": len(state.classes),
                "students": len(state.students),
                "attendance": len(state.attendance),
            }
        )
