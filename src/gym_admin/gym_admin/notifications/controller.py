from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.http import api_errors, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/send-email", methods=["POST"], endpoint="send_email")
    @login_required
    @api_errors
    def send_email():
        data = json_body()
        message_id = container.reminder_service.send_direct(
            data.get("email", ""), data.get("subject", ""), data.get("content", "")
        )
        return jsonify({"success": True, "messageId": message_id})

    @app.route("/api/reminders/expiring", methods=["POST"], endpoint="send_expiry_reminders")
    @login_required
    @api_errors
    def send_expiry_reminders():
        report = container.reminder_service.send_expiry_reminders(today=date.today())
        return jsonify({"success": True, "sent": report.sent, "failed": report.failed})
