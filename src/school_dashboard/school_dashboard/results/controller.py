from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import result_to_json


def register(app: Flask, container: Container) -> None:
    service = container.result_service

    @app.get("/api/results", endpoint="results_list")
    @handle_errors("fetch results")
    def list_results():
        return jsonify([result_to_json(r) for r in service.list()])

    @app.get("/api/results/<raw_id>", endpoint="results_get")
    @handle_errors("fetch result")
    def get_result(raw_id: str):
        return jsonify(result_to_json(service.get(parse_id(raw_id, "result"))))

    @app.get("/api/results/student/<raw_id>", endpoint="results_by_student")
    @handle_errors("fetch student results")
    def list_student_results(raw_id: str):
        return jsonify([result_to_json(r) for r in service.list_for_student(parse_id(raw_id, "student"))])

    @app.get("/api/results/exam/<raw_id>", endpoint="results_by_exam")
    @handle_errors("fetch exam results")
    def list_exam_results(raw_id: str):
        return jsonify([result_to_json(r) for r in service.list_for_exam(parse_id(raw_id, "exam"))])

    @app.post("/api/results", endpoint="results_create")
    @handle_errors("create result")
    def create_result():
        return jsonify(result_to_json(service.create(json_body()))), 201

    @app.patch("/api/results/<raw_id>", endpoint="results_update")
    @handle_errors("update result")
    def update_result(raw_id: str):
        return jsonify(result_to_json(service.update(parse_id(raw_id, "result"), json_body())))

    @app.delete("/api/results/<raw_id>", endpoint="results_delete")
    @handle_errors("delete result")
    def delete_result(raw_id: str):
        service.delete(parse_id(raw_id, "result"))
        return "", 204
