from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import StaffAttendanceStatus, StaffStatus


@dataclass(frozen=True)
class StaffRole:
    role_id: int
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Staff:
    """Domain entity: gym employee (trainer, front desk, ...)."""

    staff_id: int
    name: str
    email: str
    role_id: int
    status: StaffStatus
    hire_date: date
    phone: Optional[str] = None
    role_name: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.staff_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role_id": self.role_id,
            "role": {"id": self.role_id, "name": self.role_name},
            "status": self.status.value,
            "hire_date": self.hire_date.strftime("%Y-%m-%d"),
            "emergency_contact": self.emergency_contact,
            "emergency_phone": self.emergency_phone,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class StaffAttendance:
    attendance_id: int
    staff_id: int
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: StaffAttendanceStatus
    total_hours: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None
