from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import handle_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.stats_service

    @app.get("/api/stats", endpoint="stats")
    @handle_errors("fetch stats")
    def stats():
        return jsonify(service.get_stats())

    @app.get("/api/analytics", endpoint="analytics")
    @handle_errors("fetch analytics data")
    def analytics():
        period = (request.args.get("period") or "all").strip().lower()
        return jsonify(service.get_analytics(period))
