from datetime import date, datetime

import pytest

from src.gym_admin.gym_admin.core.enums import StaffStatus
from src.gym_admin.gym_admin.core.exceptions import StaffNotFound, ValidationError
from src.gym_admin.gym_admin.staff.service import StaffAttendanceService, StaffInput, StaffService


@pytest.fixture
def staff_service(staff_repo):
    return StaffService(staff_repo)


@pytest.fixture
def attendance_service(staff_repo, staff_attendance_repo):
    return StaffAttendanceService(staff_repo, staff_attendance_repo)


def _input(**overrides):
    fields = dict(name="Dev", email="dev@example.com", role_id=1, hire_date=date(2026, 1, 5))
    fields.update(overrides)
    return StaffInput(**fields)


def test_create_staff_defaults_to_active(staff_service, staff_repo):
    staff_id = staff_service.create_staff(_input())
    assert staff_repo.get_by_id(staff_id).status == StaffStatus.ACTIVE


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"role_id": 0}, "Role is required"),
        ({"hire_date": None}, "Hire date is required"),
        ({"role_id": 9}, "Unknown staff role"),
        ({"status": "Retired"}, "Invalid staff status"),
    ],
)
def test_create_staff_validation(staff_service, overrides, message):
    with pytest.raises(ValidationError, match=message):
        staff_service.create_staff(_input(**overrides))


def test_update_missing_staff(staff_service):
    with pytest.raises(StaffNotFound):
        staff_service.update_staff(3, _input())


def test_scan_checks_in_then_out(attendance_service, staff_repo, staff_attendance_repo, make_staff):
    staff = staff_repo.add(make_staff())

    first = attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 8, 0))
    second = attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 16, 20))

    assert first.to_dict()["message"] == "Check-in successful"
    assert second.is_check_out is True
    assert second.total_hours == 8.33
    record = staff_attendance_repo.get_for_staff_and_date(staff.staff_id, date(2026, 2, 2))
    assert record.is_open is False


def test_third_scan_same_day_is_rejected(attendance_service, staff_repo, make_staff):
    staff = staff_repo.add(make_staff())
    attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 8, 0))
    attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 12, 0))

    with pytest.raises(ValidationError, match="Already checked out"):
        attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 13, 0))


def test_inactive_staff_cannot_scan(attendance_service, staff_repo, make_staff):
    staff = staff_repo.add(make_staff(status=StaffStatus.ON_LEAVE))
    with pytest.raises(ValidationError, match="not active"):
        attendance_service.scan_staff(staff.staff_id, now=datetime(2026, 2, 2, 8, 0))


def test_attendance_range_must_be_ordered(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.attendance_between(start=date(2026, 2, 3), end=date(2026, 2, 1))
