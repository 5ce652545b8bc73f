from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, request_json
from ..container import Container
from .model import Student


def register(app: Flask, container: Container) -> None:
    api = api_view(app, container)
    service = container.student_service

    def student_json(s: Student) -> dict:
        return {
            "id": s.student_id,
            "nis": s.nis,
            "name": s.name,
            "class_id": s.class_id,
            "class_name": service.class_name_for(s),
        }

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @api
    def list_students():
        class_id = request.args.get("class_id")
        if class_id:
            items = service.roster(class_id, sort_by_name=True)
        else:
            items = service.search(request.args.get("q"))
        return jsonify({"items": [student_json(s) for s in items]})

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @api
    def add_student():
        data = request_json(request)
        s = service.save_student(nis=data.get("nis"), name=data.get("name"), class_id=data.get("class_id"))
        return jsonify({"success": True, "message": "Data Siswa Disimpan", "item": student_json(s)}), 201

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @api
    def update_student(student_id: str):
        data = request_json(request)
        s = service.save_student(
            nis=data.get("nis"),
            name=data.get("name"),
            class_id=data.get("class_id"),
            student_id=student_id,
        )
        return jsonify({"success": True, "message": "Data Siswa Disimpan", "item": student_json(s)})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @api
    def delete_student(student_id: str):
        service.delete_student(student_id)
        return jsonify({"success": True, "message": "Siswa telah dihapus."})
