from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AnomalyKind, MembershipStatus
from .rules.base import AnomalyRule, OperatingHours, ScanContext
from .rules.duplicate_rule import DuplicateScanRule
from .rules.expired_rule import ExpiredMembershipRule
from .rules.unusual_hours_rule import UnusualHoursRule

_MESSAGES = {
    None: "Check-in successful",
    AnomalyKind.EXPIRED_MEMBERSHIP: "Membership expired",
    AnomalyKind.DUPLICATE_SCAN: "Check-in successful (already checked in today)",
    AnomalyKind.UNUSUAL_HOURS: "Check-in successful (unusual hours)",
}


def default_rules() -> list[AnomalyRule]:
    # Order is priority: first match wins.
    return [ExpiredMembershipRule(), DuplicateScanRule(), UnusualHoursRule()]


@dataclass(frozen=True)
class Classification:
    anomaly: Optional[AnomalyKind]
    message: str

    @property
    def admitted(self) -> bool:
        return self.anomaly != AnomalyKind.EXPIRED_MEMBERSHIP


@dataclass
class AnomalyClassifier:
    """Chain of Responsibility over the anomaly rules.

    Stateless: every call is decided from the arguments alone.
    """

    hours: OperatingHours = field(default_factory=OperatingHours)
    rules: Sequence[AnomalyRule] = field(default_factory=default_rules)

    def classify(
        self,
        *,
        scanned_at: datetime,
        member_status: MembershipStatus,
        last_check_in: Optional[datetime],
    ) -> Classification:
        ctx = ScanContext(
            scanned_at=scanned_at,
            member_status=member_status,
            last_check_in=last_check_in,
            hours=self.hours,
        )
        for rule in self.rules:
            if rule.matches(ctx):
                return Classification(anomaly=rule.kind, message=_MESSAGES[rule.kind])
        return Classification(anomaly=None, message=_MESSAGES[None])
