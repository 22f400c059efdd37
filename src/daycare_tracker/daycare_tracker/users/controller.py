from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.web import api_action, current_uid, login_required, payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @api_action("System error while signing in")
    def login():
        data = payload()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=7)
        session["uid"] = s_user.uid
        session["name"] = s_user.display_name
        return jsonify({"success": True, "uid": s_user.uid, "name": s_user.display_name})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/me", endpoint="me")
    @login_required
    @api_action("System error while loading the account")
    def me():
        s_user = container.auth_service.session_user(current_uid())
        return jsonify({"uid": s_user.uid, "name": s_user.display_name})
