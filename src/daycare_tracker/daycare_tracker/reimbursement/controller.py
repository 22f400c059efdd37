from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, send_file

from ..common.web import api_action, current_uid, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/monthly", endpoint="monthly_report")
    @login_required
    @api_action("System error while building the report")
    def monthly_report():
        report = container.report_service.build_report(current_uid())
        return jsonify([asdict(s) for s in report.monthly])

    @app.route("/api/reports/annual", endpoint="annual_report")
    @login_required
    @api_action("System error while building the report")
    def annual_report():
        report = container.report_service.build_report(current_uid())
        return jsonify([asdict(s) for s in report.annual])

    @app.route("/export", methods=["POST"], endpoint="export_workbook")
    @login_required
    @api_action("System error while exporting the workbook")
    def export_workbook():
        uid = current_uid()
        report = container.report_service.build_report(uid)
        path = container.exporter.export(report, uid)
        return send_file(
            path.resolve(),
            as_attachment=True,
            download_name=path.name,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
