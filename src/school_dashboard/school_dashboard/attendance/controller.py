from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import attendance_to_json


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.get("/api/attendance", endpoint="attendance_list")
    @handle_errors("fetch attendance")
    def list_attendance():
        return jsonify([attendance_to_json(a) for a in service.list()])

    @app.get("/api/attendance/<raw_id>", endpoint="attendance_get")
    @handle_errors("fetch attendance record")
    def get_attendance(raw_id: str):
        return jsonify(attendance_to_json(service.get(parse_id(raw_id, "attendance"))))

    @app.get("/api/attendance/student/<raw_id>", endpoint="attendance_by_student")
    @handle_errors("fetch student attendance")
    def list_student_attendance(raw_id: str):
        records = service.list_for_student(parse_id(raw_id, "student"))
        return jsonify([attendance_to_json(a) for a in records])

    @app.post("/api/attendance", endpoint="attendance_create")
    @handle_errors("create attendance record")
    def create_attendance():
        return jsonify(attendance_to_json(service.create(json_body()))), 201

    @app.patch("/api/attendance/<raw_id>", endpoint="attendance_update")
    @handle_errors("update attendance record")
    def update_attendance(raw_id: str):
        record = service.update(parse_id(raw_id, "attendance"), json_body())
        return jsonify(attendance_to_json(record))
