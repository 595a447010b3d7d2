from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import StaffAttendanceStatus, StaffStatus
from .model import Staff, StaffAttendance, StaffRole


class StaffRepository(Protocol):
    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[StaffStatus] = None, role_name: Optional[str] = None) -> Sequence[Staff]:
        raise NotImplementedError

    def list_roles(self) -> Sequence[StaffRole]:
        raise NotImplementedError

    def get_role(self, role_id: int) -> Optional[StaffRole]:
        raise NotImplementedError

    def create_staff(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str],
        role_id: int,
        status: StaffStatus,
        hire_date: date,
        emergency_contact: Optional[str] = None,
        emergency_phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_staff(
        self,
        staff_id: int,
        *,
        name: str,
        email: str,
        phone: Optional[str],
        role_id: int,
        status: StaffStatus,
        hire_date: date,
        emergency_contact: Optional[str] = None,
        emergency_phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, staff_id: int) -> bool:
        raise NotImplementedError


class StaffAttendanceRepository(Protocol):
    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffAttendance]:
        raise NotImplementedError

    def create_checkin(
        self, *, staff_id: int, work_date: date, check_in_time: datetime, status: StaffAttendanceStatus
    ) -> int:
        raise NotImplementedError

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime, total_hours: float) -> bool:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[StaffAttendance]:
        raise NotImplementedError
