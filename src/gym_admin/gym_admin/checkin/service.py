from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AnomalyKind, ScanResultKind
from ..core.exceptions import MemberNotFound, ValidationError
from ..members.model import Member
from ..members.repository import MemberRepository
from ..notifications.messages import ANOMALY_SUBJECT, anomaly_message
from ..notifications.notifier import Notifier
from .classifier import AnomalyClassifier
from .model import AnomalyRecord, ScanResult
from .repository import AnomalyRepository, CheckInRepository

logger = logging.getLogger(__name__)


class CheckInService:
    """Use case: a member scans their QR code at the front desk."""

    def __init__(
        self,
        members: MemberRepository,
        checkins: CheckInRepository,
        anomalies: AnomalyRepository,
        *,
        classifier: Optional[AnomalyClassifier] = None,
        notifier: Optional[Notifier] = None,
        staff_email: Optional[str] = None,
    ):
        self._members = members
        self._checkins = checkins
        self._anomalies = anomalies
        self._classifier = classifier or AnomalyClassifier()
        self._notifier = notifier
        self._staff_email = staff_email

    def scan_member(self, member_id: int, *, now: datetime | None = None) -> ScanResult:
        now = now or datetime.now()

        member = self._members.get_by_id(int(member_id))
        if not member:
            raise MemberNotFound(member_id)

        last = self._checkins.get_last_for_member(member.member_id)
        decision = self._classifier.classify(
            scanned_at=now,
            member_status=member.status_on(now),
            last_check_in=last.timestamp if last else None,
        )
        result = ScanResult(
            member_id=member.member_id,
            member_name=member.name,
            admitted=decision.admitted,
            message=decision.message,
            anomaly=decision.anomaly,
        )

        try:
            self._checkins.append(
                member_id=member.member_id,
                timestamp=now,
                result_kind=ScanResultKind.from_anomaly(decision.anomaly),
            )
        except Exception:
            logger.exception("Could not record check-in for member %s", member.member_id)
            result.warnings.append("Check-in could not be saved")

        if decision.anomaly:
            logger.warning("Check-in anomaly %s for member %s", decision.anomaly.value, member.member_id)
            self._record_anomaly(member, decision.anomaly, now, result)

        return result

    def _record_anomaly(self, member: Member, kind: AnomalyKind, now: datetime, result: ScanResult) -> None:
        try:
            self._anomalies.append(member_id=member.member_id, kind=kind, timestamp=now)
        except Exception:
            logger.exception("Could not record %s anomaly for member %s", kind.value, member.member_id)
            result.warnings.append("Anomaly could not be saved")

        if not self._notifier or not self._staff_email:
            return
        try:
            self._notifier.send(self._staff_email, ANOMALY_SUBJECT, anomaly_message(kind, member.name, now))
        except Exception:
            logger.exception("Anomaly notification failed for member %s", member.member_id)

    def history_for_member(self, member_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[dict]:
        if not self._members.get_by_id(int(member_id)):
            raise MemberNotFound(member_id)
        return [
            {
                "id": e.event_id,
                "member_id": e.member_id,
                "date": e.timestamp.strftime("%Y-%m-%d"),
                "time": e.timestamp.strftime("%H:%M:%S"),
                "result": e.result_kind.value,
            }
            for e in self._checkins.get_recent_for_member(int(member_id), limit)
        ]

    def list_anomalies(self, *, resolved: Optional[bool] = None, limit: int = 100) -> list[AnomalyRecord]:
        return list(self._anomalies.list_recent(resolved=resolved, limit=limit))

    def resolve_anomaly(self, anomaly_id: int) -> None:
        record = self._anomalies.get_by_id(int(anomaly_id))
        if not record:
            raise ValidationError("Anomaly not found")
        if record.resolved:
            raise ValidationError("Anomaly already resolved")
        if not self._anomalies.mark_resolved(record.anomaly_id):
            raise ValidationError("Failed to resolve anomaly")
