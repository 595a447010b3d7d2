from __future__ import annotations

from ...core.enums import AnomalyKind
from .base import AnomalyRule, ScanContext


class UnusualHoursRule(AnomalyRule):
    kind = AnomalyKind.UNUSUAL_HOURS

    def matches(self, ctx: ScanContext) -> bool:
        return not ctx.hours.contains(ctx.scanned_at)
