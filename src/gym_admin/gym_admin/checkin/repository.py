from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AnomalyKind, ScanResultKind
from .model import AnomalyRecord, CheckInEvent


class CheckInRepository(Protocol):
    def get_last_for_member(self, member_id: int) -> Optional[CheckInEvent]:
        raise NotImplementedError

    def get_recent_for_member(self, member_id: int, limit: int) -> Sequence[CheckInEvent]:
        raise NotImplementedError

    def append(self, *, member_id: int, timestamp: datetime, result_kind: ScanResultKind) -> int:
        raise NotImplementedError

    def count_on(self, day: date) -> int:
        raise NotImplementedError


class AnomalyRepository(Protocol):
    def append(self, *, member_id: int, kind: AnomalyKind, timestamp: datetime) -> int:
        raise NotImplementedError

    def get_by_id(self, anomaly_id: int) -> Optional[AnomalyRecord]:
        raise NotImplementedError

    def list_recent(self, *, resolved: Optional[bool] = None, limit: int = 100) -> Sequence[AnomalyRecord]:
        raise NotImplementedError

    def mark_resolved(self, anomaly_id: int) -> bool:
        raise NotImplementedError

    def count_unresolved(self) -> int:
        raise NotImplementedError
