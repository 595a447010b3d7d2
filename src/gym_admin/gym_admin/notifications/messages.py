from __future__ import annotations

from datetime import datetime
from html import escape

from ..core.enums import AnomalyKind
from ..members.model import Member

ANOMALY_SUBJECT = "Gym Check-In Anomaly Detected"
EXPIRY_SUBJECT = "Your gym membership is about to expire"

_ANOMALY_TEXT = {
    AnomalyKind.DUPLICATE_SCAN: "Duplicate scan detected for {name}",
    AnomalyKind.UNUSUAL_HOURS: "Unusual hours check-in detected for {name}",
    AnomalyKind.EXPIRED_MEMBERSHIP: "Expired membership check-in attempt by {name}",
}


def anomaly_message(kind: AnomalyKind, member_name: str, at: datetime) -> str:
    text = _ANOMALY_TEXT[kind].format(name=escape(member_name))
    return f"<h1>Anomaly Alert</h1><p>{text}</p><p>Time: {at.strftime('%Y-%m-%d %H:%M:%S')}</p>"


def expiry_message(member: Member) -> str:
    return (
        f"<p>Dear {escape(member.name)}, your gym membership will expire on "
        f"{member.expiration_date.strftime('%d %b %Y')}. You joined on "
        f"{member.join_date.strftime('%d %b %Y')}. Please renew your membership "
        "to continue enjoying our services.</p>"
    )
