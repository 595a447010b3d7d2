from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.validators import require_email, require_non_empty
from ..core.enums import StaffAttendanceStatus, StaffStatus
from ..core.exceptions import StaffNotFound, ValidationError
from .model import Staff, StaffAttendance
from .repository import StaffAttendanceRepository, StaffRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaffInput:
    name: str
    email: str
    role_id: int
    hire_date: Optional[date]
    status: str = StaffStatus.ACTIVE.value
    phone: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class StaffScanResult:
    staff_id: int
    staff_name: str
    is_check_out: bool
    total_hours: Optional[float] = None

    @property
    def message(self) -> str:
        return "Check-out successful" if self.is_check_out else "Check-in successful"

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": self.message,
            "staffName": self.staff_name,
            "isCheckOut": self.is_check_out,
            "totalHours": self.total_hours,
        }


class StaffService:
    """Use cases: manage staff records (admin)."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def get_staff(self, staff_id: int) -> Staff:
        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise StaffNotFound(staff_id)
        return staff

    def list_staff(self, *, status: Optional[str] = None, role_name: Optional[str] = None) -> list[dict]:
        status_filter = self._parse_status(status) if status else None
        return [s.to_dict() for s in self._staff.list_all(status=status_filter, role_name=role_name)]

    def list_roles(self) -> list[dict]:
        return [{"id": r.role_id, "name": r.name, "description": r.description} for r in self._staff.list_roles()]

    def create_staff(self, data: StaffInput) -> int:
        fields = self._validate(data)
        staff_id = self._staff.create_staff(**fields)
        logger.info("Created staff %s (%s)", staff_id, fields["email"])
        return staff_id

    def update_staff(self, staff_id: int, data: StaffInput) -> None:
        self.get_staff(staff_id)
        self._staff.update_staff(int(staff_id), **self._validate(data))

    def delete_staff(self, staff_id: int) -> None:
        self.get_staff(staff_id)
        if not self._staff.delete_by_id(int(staff_id)):
            raise ValidationError("Failed to delete staff member")

    @staticmethod
    def _parse_status(value: str) -> StaffStatus:
        try:
            return StaffStatus(value)
        except ValueError:
            raise ValidationError(f"Invalid staff status: {value}")

    def _validate(self, data: StaffInput) -> dict:
        if not data.role_id:
            raise ValidationError("Role is required")
        if data.hire_date is None:
            raise ValidationError("Hire date is required")
        if not self._staff.get_role(int(data.role_id)):
            raise ValidationError("Unknown staff role")

        return {
            "name": require_non_empty(data.name, "Name"),
            "email": require_email(data.email),
            "phone": (data.phone or "").strip() or None,
            "role_id": int(data.role_id),
            "status": self._parse_status(data.status or StaffStatus.ACTIVE.value),
            "hire_date": data.hire_date,
            "emergency_contact": data.emergency_contact or None,
            "emergency_phone": data.emergency_phone or None,
            "notes": data.notes or None,
        }


class StaffAttendanceService:
    """Use case: staff scan their QR code to check in, then again to check out."""

    def __init__(self, staff: StaffRepository, attendance: StaffAttendanceRepository):
        self._staff = staff
        self._attendance = attendance

    def scan_staff(self, staff_id: int, *, now: datetime | None = None) -> StaffScanResult:
        now = now or datetime.now()
        today = now.date()

        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise StaffNotFound(staff_id)
        if staff.status != StaffStatus.ACTIVE:
            raise ValidationError("Staff is not active")

        record = self._attendance.get_for_staff_and_date(staff.staff_id, today)
        if record is None:
            self._attendance.create_checkin(
                staff_id=staff.staff_id,
                work_date=today,
                check_in_time=now,
                status=StaffAttendanceStatus.PRESENT,
            )
            logger.info("Staff %s checked in at %s", staff.staff_id, now)
            return StaffScanResult(staff_id=staff.staff_id, staff_name=staff.name, is_check_out=False)

        if not record.is_open:
            raise ValidationError("Already checked out today")

        total_hours = round((now - record.check_in_time).total_seconds() / 3600, 2)
        self._attendance.update_checkout(attendance_id=record.attendance_id, check_out_time=now, total_hours=total_hours)
        logger.info("Staff %s checked out after %.2f hours", staff.staff_id, total_hours)
        return StaffScanResult(
            staff_id=staff.staff_id, staff_name=staff.name, is_check_out=True, total_hours=total_hours
        )

    def attendance_between(self, *, start: date, end: date, staff_id: Optional[int] = None) -> list[StaffAttendance]:
        if start > end:
            raise ValidationError("Start date must be before end date")
        return list(self._attendance.list_range(start=start, end=end, staff_id=staff_id))
