from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.http import api_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/metrics", endpoint="metrics")
    @login_required
    @api_errors
    def metrics():
        return jsonify(container.dashboard_service.metrics(today=date.today()).to_dict())
