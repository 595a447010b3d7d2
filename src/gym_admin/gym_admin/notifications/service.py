from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from ..common.validators import require_email, require_non_empty
from ..core.constants import REMINDER_DAYS_AHEAD
from ..members.service import MemberService
from .messages import EXPIRY_SUBJECT, expiry_message
from .notifier import Notifier

logger = logging.getLogger(__name__)


@dataclass
class ReminderReport:
    sent: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)


class ReminderService:
    """Emails members whose subscription ends in a few days."""

    def __init__(self, members: MemberService, notifier: Notifier):
        self._members = members
        self._notifier = notifier

    def send_expiry_reminders(self, *, today: date | None = None, days_ahead: int = REMINDER_DAYS_AHEAD) -> ReminderReport:
        report = ReminderReport()
        for member in self._members.expiring_in(days_ahead, today=today):
            try:
                self._notifier.send(member.email, EXPIRY_SUBJECT, expiry_message(member))
                report.sent.append(member.member_id)
            except Exception:
                logger.exception("Expiry reminder failed for member %s", member.member_id)
                report.failed.append(member.member_id)
        logger.info("Expiry reminders: sent=%d failed=%d", len(report.sent), len(report.failed))
        return report

    def send_direct(self, recipient: str, subject: str, html: str) -> str:
        recipient = require_email(recipient)
        subject = require_non_empty(subject, "Subject")
        html = require_non_empty(html, "Content")
        return self._notifier.send(recipient, subject, html)
