from __future__ import annotations

from ...core.enums import AnomalyKind
from .base import AnomalyRule, ScanContext


class DuplicateScanRule(AnomalyRule):
    """Second scan within the same operating day."""

    kind = AnomalyKind.DUPLICATE_SCAN

    def matches(self, ctx: ScanContext) -> bool:
        if ctx.last_check_in is None:
            return False
        return ctx.last_check_in.date() == ctx.scanned_at.date()
