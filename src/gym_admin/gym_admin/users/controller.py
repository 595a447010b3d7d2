from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import api_errors, json_body, login_required, parse_bool
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @api_errors
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.permanent = parse_bool(data.get("remember_me", False))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value
        return jsonify({"success": True, "user": {"id": s_user.user_id, "name": s_user.full_name, "role": s_user.role.value}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"id": session["user_id"], "name": session.get("name"), "role": session.get("role")})
