from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import classroom_to_json


def register(app: Flask, container: Container) -> None:
    service = container.classroom_service

    @app.get("/api/classrooms", endpoint="classrooms_list")
    @handle_errors("fetch classrooms")
    def list_classrooms():
        return jsonify([classroom_to_json(c) for c in service.list()])

    @app.get("/api/classrooms/<raw_id>", endpoint="classrooms_get")
    @handle_errors("fetch classroom")
    def get_classroom(raw_id: str):
        return jsonify(classroom_to_json(service.get(parse_id(raw_id, "classroom"))))

    @app.post("/api/classrooms", endpoint="classrooms_create")
    @handle_errors("create classroom")
    def create_classroom():
        return jsonify(classroom_to_json(service.create(json_body()))), 201

    @app.patch("/api/classrooms/<raw_id>", endpoint="classrooms_update")
    @handle_errors("update classroom")
    def update_classroom(raw_id: str):
        classroom = service.update(parse_id(raw_id, "classroom"), json_body())
        return jsonify(classroom_to_json(classroom))

    @app.delete("/api/classrooms/<raw_id>", endpoint="classrooms_delete")
    @handle_errors("delete classroom")
    def delete_classroom(raw_id: str):
        service.delete(parse_id(raw_id, "classroom"))
        return "", 204
