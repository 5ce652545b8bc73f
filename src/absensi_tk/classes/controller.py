from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, request_json
from ..container import Container
from .model import CLASS_PATCH_FIELDS, ClassRoom


def class_json(c: ClassRoom) -> dict:
    return {
        "id": c.class_id,
        "name": c.name,
        "teacher_name": c.teacher_name,
        "teacher_nip": c.teacher_nip,
        "headmaster_name": c.headmaster_name,
        "headmaster_nip": c.headmaster_nip,
    }


def register(app: Flask, container: Container) -> None:
    api = api_view(app, container)

    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    @api
    def list_classes():
        counts = {c["class_id"]: c["students"] for c in container.class_service.student_counts()}
        items = []
        for c in container.class_service.list_classes():
            item = class_json(c)
            item["students"] = counts.get(c.class_id, 0)
            items.append(item)
        return jsonify({"items": items})

    @app.route("/api/classes", methods=["POST"], endpoint="add_class")
    @api
    def add_class():
        data = request_json(request)
        room = container.class_service.add_class(
            name=data.get("name", ""),
            teacher_name=data.get("teacher_name"),
            teacher_nip=data.get("teacher_nip"),
            headmaster_name=data.get("headmaster_name"),
            headmaster_nip=data.get("headmaster_nip"),
        )
        return jsonify({"success": True, "message": "Kelas berhasil ditambahkan", "item": class_json(room)}), 201

    @app.route("/api/classes/<class_id>", methods=["PUT"], endpoint="update_class")
    @api
    def update_class(class_id: str):
        data = request_json(request)
        changes = {k: data[k] for k in CLASS_PATCH_FIELDS if k in data}
        room = container.class_service.update_class(class_id, **changes)
        return jsonify({"success": True, "message": "Berhasil diperbarui", "item": class_json(room)})

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="delete_class")
    @api
    def delete_class(class_id: str):
        container.class_service.delete_class(class_id)
        return jsonify({"success": True, "message": "Kelas telah dihapus."})
