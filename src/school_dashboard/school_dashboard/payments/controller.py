from __future__ import annotations

from flask import Flask, jsonify

from ..common.api import handle_errors, json_body, parse_id
from ..container import Container
from .schema import payment_to_json


def register(app: Flask, container: Container) -> None:
    service = container.payment_service

    @app.get("/api/payments", endpoint="payments_list")
    @handle_errors("fetch payments")
    def list_payments():
        return jsonify([payment_to_json(p) for p in service.list()])

    @app.get("/api/payments/<raw_id>", endpoint="payments_get")
    @handle_errors("fetch payment")
    def get_payment(raw_id: str):
        return jsonify(payment_to_json(service.get(parse_id(raw_id, "payment"))))

    @app.get("/api/payments/student/<raw_id>", endpoint="payments_by_student")
    @handle_errors("fetch student payments")
    def list_student_payments(raw_id: str):
        return jsonify([payment_to_json(p) for p in service.list_for_student(parse_id(raw_id, "student"))])

    @app.post("/api/payments", endpoint="payments_create")
    @handle_errors("create payment")
    def create_payment():
        return jsonify(payment_to_json(service.create(json_body()))), 201

    @app.patch("/api/payments/<raw_id>", endpoint="payments_update")
    @handle_errors("update payment")
    def update_payment(raw_id: str):
        payment = service.update(parse_id(raw_id, "payment"), json_body())
        return jsonify(payment_to_json(payment))
