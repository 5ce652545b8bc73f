from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    api = api_view(app, container)

    @app.route("/api/attendance/<class_id>/<date>", methods=["GET"], endpoint="attendance_session")
    @api
    def attendance_session(class_id: str, date: str):
        entries = container.attendance_service.load_session(class_id, date)
        roster = container.student_service.roster(class_id)
        return jsonify(
            {
                "class_id": class_id,
                "date": date,
                "students": [{"id": s.student_id, "nis": s.nis, "name": s.name} for s in roster],
                "entries": entries,
            }
        )

    @app.route("/api/attendance/<class_id>/<date>", methods=["POST"], endpoint="save_attendance")
    @api
    def save_attendance(class_id: str, date: str):
        data = request_json(request)
        entries = data.get("entries")
        if not isinstance(entries, dict):
            entries = {}
        saved = container.attendance_service.save_roster(class_id, date, entries)
        return jsonify(
            {
                "success": True,
                "message": "Absensi Tersimpan",
                "saved": len(saved),
            }
        )
