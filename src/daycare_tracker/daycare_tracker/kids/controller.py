from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.web import api_action, current_uid, login_required, payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/kids", methods=["GET"], endpoint="list_kids")
    @login_required
    @api_action("System error while loading children")
    def list_kids():
        include_inactive = request.args.get("all") in {"1", "true"}
        kids = container.kid_service.list_children(current_uid(), include_inactive=include_inactive)
        return jsonify([asdict(k) for k in kids])

    @app.route("/api/kids", methods=["POST"], endpoint="add_kid")
    @login_required
    @api_action("System error while adding the child")
    def add_kid():
        child = container.kid_service.add_child(current_uid(), payload().get("name", ""))
        return jsonify({"success": True, "kid": asdict(child)}), 201

    @app.route("/api/kids/<kid_id>/deactivate", methods=["POST"], endpoint="deactivate_kid")
    @login_required
    @api_action("System error while removing the child")
    def deactivate_kid(kid_id: str):
        container.kid_service.deactivate_child(current_uid(), kid_id)
        return jsonify({"success": True})

    @app.route("/api/kids/<kid_id>", methods=["GET"], endpoint="get_kid")
    @login_required
    @api_action("System error while loading the child")
    def get_kid(kid_id: str):
        return jsonify(asdict(container.kid_service.get_child(current_uid(), kid_id)))
