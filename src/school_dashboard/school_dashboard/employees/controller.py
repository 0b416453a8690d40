from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import employee_to_json


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.get("/api/employees", endpoint="employees_list")
    @handle_errors("fetch employees")
    def list_employees():
        return jsonify([employee_to_json(e) for e in service.list()])

    @app.get("/api/employees/<raw_id>", endpoint="employees_get")
    @handle_errors("fetch employee")
    def get_employee(raw_id: str):
        return jsonify(employee_to_json(service.get(parse_id(raw_id, "employee"))))

    @app.post("/api/employees", endpoint="employees_create")
    @handle_errors("create employee")
    def create_employee():
        return jsonify(employee_to_json(service.create(json_body()))), 201

    @app.patch("/api/employees/<raw_id>", endpoint="employees_update")
    @handle_errors("update employee")
    def update_employee(raw_id: str):
        employee = service.update(parse_id(raw_id, "employee"), json_body())
        return jsonify(employee_to_json(employee))

    @app.delete("/api/employees/<raw_id>", endpoint="employees_delete")
    @handle_errors("delete employee")
    def delete_employee(raw_id: str):
        service.delete(parse_id(raw_id, "employee"))
        return "", 204
