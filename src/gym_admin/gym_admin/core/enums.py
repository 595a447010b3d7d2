from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Dashboard account role."""

    ADMIN = "admin"
    STAFF = "staff"


class MembershipStatus(str, Enum):
    """Derived membership status; never persisted."""

    ACTIVE = "active"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"


class AnomalyKind(str, Enum):
    DUPLICATE_SCAN = "duplicate_scan"
    UNUSUAL_HOURS = "unusual_hours"
    EXPIRED_MEMBERSHIP = "expired_membership"


class ScanResultKind(str, Enum):
    """Outcome stored on every check-in log entry."""

    VALID = "valid"
    DUPLICATE_SCAN = "duplicate_scan"
    UNUSUAL_HOURS = "unusual_hours"
    EXPIRED_MEMBERSHIP = "expired_membership"

    @classmethod
    def from_anomaly(cls, anomaly: "AnomalyKind | None") -> "ScanResultKind":
        if anomaly is None:
            return cls.VALID
        return cls(anomaly.value)


class StaffStatus(str, Enum):
    ACTIVE = "Active"
    ON_LEAVE = "On Leave"
    TERMINATED = "Terminated"


class StaffAttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"
