from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import AnomalyKind, ScanResultKind


@dataclass(frozen=True)
class CheckInEvent:
    """Append-only log entry: one per scan."""

    event_id: int
    member_id: int
    timestamp: datetime
    result_kind: ScanResultKind


@dataclass(frozen=True)
class AnomalyRecord:
    """A flagged scan awaiting staff review."""

    anomaly_id: int
    member_id: int
    kind: AnomalyKind
    timestamp: datetime
    resolved: bool = False
    member_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.anomaly_id,
            "member_id": self.member_id,
            "member_name": self.member_name,
            "type": self.kind.value,
            "date": self.timestamp.isoformat(),
            "resolved": self.resolved,
        }


@dataclass
class ScanResult:
    """What the scanner shows after a member check-in.

    `warnings` carries persistence problems that did not block the scan.
    """

    member_id: int
    member_name: str
    admitted: bool
    message: str
    anomaly: Optional[AnomalyKind] = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "success": self.admitted,
            "message": self.message,
            "anomaly": self.anomaly.value if self.anomaly else None,
            "memberName": self.member_name,
            "warnings": list(self.warnings),
        }
