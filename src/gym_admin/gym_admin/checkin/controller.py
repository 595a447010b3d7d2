from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import api_errors, login_required, parse_bool, parse_int
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/check-in", methods=["GET"], endpoint="member_check_in")
    @api_errors
    def member_check_in():
        """Target of the member QR code; called by the front-desk scanner."""
        member_id = parse_int(request.args.get("memberId"), "Member ID")
        logger.info("Processing check-in for member %s", member_id)

        result = container.checkin_service.scan_member(member_id)
        return jsonify(result.to_dict())

    @app.route("/api/members/<int:member_id>/attendance", endpoint="member_attendance")
    @login_required
    @api_errors
    def member_attendance(member_id: int):
        limit = int(request.args.get("limit") or 30)
        return jsonify(container.checkin_service.history_for_member(member_id, limit=limit))

    @app.route("/api/anomalies", endpoint="anomalies_list")
    @login_required
    @api_errors
    def anomalies_list():
        resolved_s = request.args.get("resolved")
        resolved = parse_bool(resolved_s) if resolved_s not in (None, "") else None
        rows = container.checkin_service.list_anomalies(resolved=resolved)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/anomalies/<int:anomaly_id>/resolve", methods=["POST"], endpoint="anomalies_resolve")
    @login_required
    @api_errors
    def anomalies_resolve(anomaly_id: int):
        container.checkin_service.resolve_anomaly(anomaly_id)
        return jsonify({"success": True})
