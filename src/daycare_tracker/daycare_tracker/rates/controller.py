from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import api_action, current_uid, login_required, payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/rates", methods=["GET"], endpoint="list_rates")
    @login_required
    @api_action("System error while loading rates")
    def list_rates():
        return jsonify([asdict(r) for r in container.rate_service.list_rates(current_uid())])

    @app.route("/api/rates", methods=["POST"], endpoint="save_rates")
    @login_required
    @api_action("System error while saving rates")
    def save_rates():
        data = payload()
        rate_set = container.rate_service.save_rates(
            current_uid(),
            year=data.get("year"),
            breakfast=data.get("breakfast"),
            snack=data.get("snack"),
            lunch=data.get("lunch"),
        )
        return jsonify({"success": True, "rates": asdict(rate_set)})
