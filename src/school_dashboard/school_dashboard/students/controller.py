from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import student_to_json


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.get("/api/students", endpoint="students_list")
    @handle_errors("fetch students")
    def list_students():
        return jsonify([student_to_json(s) for s in service.list()])

    @app.get("/api/students/<raw_id>", endpoint="students_get")
    @handle_errors("fetch student")
    def get_student(raw_id: str):
        student = service.get(parse_id(raw_id, "student"))
        return jsonify(student_to_json(student))

    @app.post("/api/students", endpoint="students_create")
    @handle_errors("create student")
    def create_student():
        student = service.create(json_body())
        return jsonify(student_to_json(student)), 201

    @app.patch("/api/students/<raw_id>", endpoint="students_update")
    @handle_errors("update student")
    def update_student(raw_id: str):
        student = service.update(parse_id(raw_id, "student"), json_body())
        return jsonify(student_to_json(student))

    @app.delete("/api/students/<raw_id>", endpoint="students_delete")
    @handle_errors("delete student")
    def delete_student(raw_id: str):
        service.delete(parse_id(raw_id, "student"))
        return "", 204
