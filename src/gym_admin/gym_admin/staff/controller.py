from __future__ import annotations

import io
import logging
from datetime import date, timedelta

from flask import Flask, jsonify, request, send_file

from ..common.http import api_errors, json_body, login_required, parse_date, parse_int
from ..container import Container
from ..core.enums import StaffStatus
from ..qr.generator import render_qr_png, staff_checkin_url
from .service import StaffInput

logger = logging.getLogger(__name__)


def _staff_input(data: dict) -> StaffInput:
    role_id = data.get("role_id")
    return StaffInput(
        name=data.get("name", ""),
        email=data.get("email", ""),
        role_id=parse_int(role_id, "Role") if role_id not in (None, "") else 0,
        hire_date=parse_date(data.get("hire_date"), "Hire date") if data.get("hire_date") else None,
        status=data.get("status") or StaffStatus.ACTIVE.value,
        phone=data.get("phone"),
        emergency_contact=data.get("emergency_contact"),
        emergency_phone=data.get("emergency_phone"),
        notes=data.get("notes"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff", methods=["GET"], endpoint="staff_list")
    @login_required
    @api_errors
    def staff_list():
        return jsonify(
            container.staff_service.list_staff(status=request.args.get("status"), role_name=request.args.get("role"))
        )

    @app.route("/api/staff", methods=["POST"], endpoint="staff_create")
    @login_required
    @api_errors
    def staff_create():
        staff_id = container.staff_service.create_staff(_staff_input(json_body()))
        return jsonify(container.staff_service.get_staff(staff_id).to_dict()), 201

    @app.route("/api/staff/roles", endpoint="staff_roles")
    @login_required
    @api_errors
    def staff_roles():
        return jsonify(container.staff_service.list_roles())

    @app.route("/api/staff/<int:staff_id>", methods=["GET"], endpoint="staff_get")
    @login_required
    @api_errors
    def staff_get(staff_id: int):
        return jsonify(container.staff_service.get_staff(staff_id).to_dict())

    @app.route("/api/staff/<int:staff_id>", methods=["PUT"], endpoint="staff_update")
    @login_required
    @api_errors
    def staff_update(staff_id: int):
        container.staff_service.update_staff(staff_id, _staff_input(json_body()))
        return jsonify(container.staff_service.get_staff(staff_id).to_dict())

    @app.route("/api/staff/<int:staff_id>", methods=["DELETE"], endpoint="staff_delete")
    @login_required
    @api_errors
    def staff_delete(staff_id: int):
        container.staff_service.delete_staff(staff_id)
        return jsonify({"success": True})

    @app.route("/api/staff/<int:staff_id>/qr", endpoint="staff_qr")
    @login_required
    @api_errors
    def staff_qr(staff_id: int):
        staff = container.staff_service.get_staff(staff_id)
        png = render_qr_png(staff_checkin_url(container.app_url, staff.staff_id))
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"staff-{staff.staff_id}.png")

    @app.route("/api/staff-check-in", methods=["GET"], endpoint="staff_check_in")
    @api_errors
    def staff_check_in():
        staff_id = parse_int(request.args.get("staffId"), "Staff ID")
        logger.info("Processing staff check-in/out for %s", staff_id)
        result = container.staff_attendance_service.scan_staff(staff_id)
        return jsonify(result.to_dict())

    @app.route("/api/staff-attendance", endpoint="staff_attendance")
    @login_required
    @api_errors
    def staff_attendance():
        today = date.today()
        start = parse_date(request.args.get("start"), "Start date", default=today - timedelta(days=7))
        end = parse_date(request.args.get("end"), "End date", default=today)
        staff_id_s = request.args.get("staffId")
        staff_id = parse_int(staff_id_s, "Staff ID") if staff_id_s else None

        rows = container.staff_attendance_service.attendance_between(start=start, end=end, staff_id=staff_id)
        return jsonify(
            [
                {
                    "id": r.attendance_id,
                    "staff_id": r.staff_id,
                    "date": r.work_date.strftime("%Y-%m-%d"),
                    "check_in_time": r.check_in_time.isoformat() if r.check_in_time else None,
                    "check_out_time": r.check_out_time.isoformat() if r.check_out_time else None,
                    "total_hours": r.total_hours,
                    "status": r.status.value,
                }
                for r in rows
            ]
        )
