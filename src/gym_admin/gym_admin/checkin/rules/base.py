from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.constants import DEFAULT_CLOSE_HOUR, DEFAULT_OPEN_HOUR
from ...core.enums import AnomalyKind, MembershipStatus


@dataclass(frozen=True)
class OperatingHours:
    """Normal check-in window: open_hour <= hour < close_hour."""

    open_hour: int = DEFAULT_OPEN_HOUR
    close_hour: int = DEFAULT_CLOSE_HOUR

    def __post_init__(self):
        if not (0 <= self.open_hour <= 23 and 1 <= self.close_hour <= 24):
            raise ValueError(f"Invalid operating hours: {self.open_hour}-{self.close_hour}")
        if self.open_hour >= self.close_hour:
            raise ValueError(f"Opening hour must be before closing hour: {self.open_hour}-{self.close_hour}")

    def contains(self, moment: datetime) -> bool:
        return self.open_hour <= moment.hour < self.close_hour


@dataclass(frozen=True)
class ScanContext:
    scanned_at: datetime
    member_status: MembershipStatus
    last_check_in: Optional[datetime]
    hours: OperatingHours


class AnomalyRule(ABC):
    """Strategy Pattern: one check that may flag a scan."""

    kind: AnomalyKind

    @abstractmethod
    def matches(self, ctx: ScanContext) -> bool:
        raise NotImplementedError
