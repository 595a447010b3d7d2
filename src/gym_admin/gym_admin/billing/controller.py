from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body, login_required, parse_bool, parse_int
from ..container import Container
from ..core.constants import DEFAULT_CURRENCY
from ..core.exceptions import ValidationError
from .service import PaymentConfirmation

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/create-order", methods=["POST"], endpoint="create_order")
    @login_required
    @api_errors
    def create_order():
        data = json_body()
        receipt = data.get("receipt")
        if data.get("plan"):
            order_id = container.billing_service.create_order_for_plan(data["plan"], receipt=receipt)
        else:
            order_id = container.billing_service.create_order(
                amount=parse_int(data.get("amount"), "Amount"),
                currency=data.get("currency") or DEFAULT_CURRENCY,
                receipt=receipt,
            )
        return jsonify({"success": True, "orderId": order_id})

    @app.route("/api/verify-payment", methods=["POST"], endpoint="verify_payment")
    @login_required
    @api_errors
    def verify_payment():
        data = json_body()
        for key in ("razorpay_order_id", "razorpay_payment_id", "razorpay_signature", "plan"):
            if not data.get(key):
                raise ValidationError(f"{key} is required")

        verified = container.billing_service.verify_payment(
            PaymentConfirmation(
                order_id=data["razorpay_order_id"],
                payment_id=data["razorpay_payment_id"],
                signature=data["razorpay_signature"],
                member_id=parse_int(data.get("memberId"), "Member ID"),
                plan=data["plan"],
                is_renewal=parse_bool(data.get("isRenewal", False)),
            ),
            today=date.today(),
        )
        return jsonify({"success": True, "payment": verified.payment.to_dict(), "message": verified.message})

    @app.route("/api/payments", endpoint="payments_list")
    @login_required
    @api_errors
    def payments_list():
        member_id_s = request.args.get("memberId")
        member_id = parse_int(member_id_s, "Member ID") if member_id_s else None
        return jsonify(container.billing_service.list_payments(member_id=member_id))
