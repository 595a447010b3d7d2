from __future__ import annotations

from ...core.enums import AnomalyKind, MembershipStatus
from .base import AnomalyRule, ScanContext


class ExpiredMembershipRule(AnomalyRule):
    """Scan by a member whose subscription has lapsed."""

    kind = AnomalyKind.EXPIRED_MEMBERSHIP

    def matches(self, ctx: ScanContext) -> bool:
        return ctx.member_status == MembershipStatus.EXPIRED
