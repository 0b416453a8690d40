from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import exam_to_json


def register(app: Flask, container: Container) -> None:
    service = container.exam_service

    @app.get("/api/exams", endpoint="exams_list")
    @handle_errors("fetch exams")
    def list_exams():
        return jsonify([exam_to_json(e) for e in service.list()])

    @app.get("/api/exams/<raw_id>", endpoint="exams_get")
    @handle_errors("fetch exam")
    def get_exam(raw_id: str):
        return jsonify(exam_to_json(service.get(parse_id(raw_id, "exam"))))

    @app.post("/api/exams", endpoint="exams_create")
    @handle_errors("create exam")
    def create_exam():
        return jsonify(exam_to_json(service.create(json_body()))), 201

    @app.patch("/api/exams/<raw_id>", endpoint="exams_update")
    @handle_errors("update exam")
    def update_exam(raw_id: str):
        return jsonify(exam_to_json(service.update(parse_id(raw_id, "exam"), json_body())))

    @app.delete("/api/exams/<raw_id>", endpoint="exams_delete")
    @handle_errors("delete exam")
    def delete_exam(raw_id: str):
        service.delete(parse_id(raw_id, "exam"))
        return "", 204
