from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..common.api import handle_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.get("/api/reports/<kind>.<fmt>", endpoint="reports_export")
    @handle_errors("export report")
    def export_report(kind: str, fmt: str):
        report = service.export(kind, fmt.lower(), filename=request.args.get("filename"))
        return send_file(
            io.BytesIO(report.content),
            mimetype=report.mimetype,
            as_attachment=True,
            download_name=report.filename,
        )
