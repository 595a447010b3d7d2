from __future__ import annotations

import io
from datetime import date, datetime

from flask import Flask, jsonify, request, send_file

from ..common.http import api_errors, json_body, login_required, parse_date
from ..container import Container
from ..core.enums import MembershipStatus
from ..core.exceptions import ValidationError
from ..plans.model import SUBSCRIPTION_PLANS
from ..qr.generator import member_checkin_url, render_qr_png
from .service import NewMember


def register(app: Flask, container: Container) -> None:
    @app.route("/api/plans", endpoint="plans")
    def plans():
        return jsonify([p.to_dict() for p in SUBSCRIPTION_PLANS])

    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @login_required
    @api_errors
    def members_list():
        status_s = request.args.get("status")
        try:
            status = MembershipStatus(status_s) if status_s else None
        except ValueError:
            raise ValidationError(f"Invalid status: {status_s}")
        rows = container.member_service.list_members(now=datetime.now(), search=request.args.get("search"), status=status)
        return jsonify(rows)

    @app.route("/api/members", methods=["POST"], endpoint="members_create")
    @login_required
    @api_errors
    def members_create():
        data = json_body()
        member_id = container.member_service.create_member(
            NewMember(
                name=data.get("name", ""),
                age=data.get("age"),
                address=data.get("address", ""),
                email=data.get("email", ""),
                phone=data.get("phone", ""),
                registration_number=data.get("registration_number", ""),
                membership_plan=data.get("membership_plan", ""),
                join_date=parse_date(data.get("join_date"), "Join date", default=date.today()),
            )
        )
        member = container.member_service.get_member(member_id)
        return jsonify({"success": True, "member": member.to_dict(datetime.now())}), 201

    @app.route("/api/members/<int:member_id>", methods=["GET"], endpoint="members_get")
    @login_required
    @api_errors
    def members_get(member_id: int):
        return jsonify(container.member_service.get_member(member_id).to_dict(datetime.now()))

    @app.route("/api/members/<int:member_id>", methods=["PUT"], endpoint="members_update")
    @login_required
    @api_errors
    def members_update(member_id: int):
        data = json_body()
        container.member_service.update_member(
            member_id,
            name=data.get("name", ""),
            age=data.get("age"),
            address=data.get("address", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
        )
        return jsonify({"success": True, "member": container.member_service.get_member(member_id).to_dict(datetime.now())})

    @app.route("/api/members/<int:member_id>", methods=["DELETE"], endpoint="members_delete")
    @login_required
    @api_errors
    def members_delete(member_id: int):
        container.member_service.delete_member(member_id)
        return jsonify({"success": True})

    @app.route("/api/members/<int:member_id>/renew", methods=["POST"], endpoint="members_renew")
    @login_required
    @api_errors
    def members_renew(member_id: int):
        """Manual (cash) renewal; online renewals go through /api/verify-payment."""
        data = json_body()
        expiration = container.member_service.renew(member_id, data.get("plan", ""), today=date.today())
        return jsonify({"success": True, "expiration_date": expiration.strftime("%Y-%m-%d")})

    @app.route("/api/members/<int:member_id>/qr", endpoint="members_qr")
    @login_required
    @api_errors
    def members_qr(member_id: int):
        member = container.member_service.get_member(member_id)
        png = render_qr_png(member_checkin_url(container.app_url, member.member_id))
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"member-{member.member_id}.png")
