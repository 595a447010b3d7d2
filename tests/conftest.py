from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.gym_admin.gym_admin.billing.model import Payment
from src.gym_admin.gym_admin.billing.signature import verify_signature
from src.gym_admin.gym_admin.checkin.model import AnomalyRecord, CheckInEvent
from src.gym_admin.gym_admin.core.enums import AnomalyKind, ScanResultKind, StaffAttendanceStatus, StaffStatus
from src.gym_admin.gym_admin.core.exceptions import NotificationError
from src.gym_admin.gym_admin.members.model import Member
from src.gym_admin.gym_admin.staff.model import Staff, StaffAttendance, StaffRole


class InMemoryMembers:
    def __init__(self):
        self._by_id: dict[int, Member] = {}
        self._id = 0
        self.subscription_updates: list[tuple[int, str, date]] = []

    def add(self, member: Member) -> Member:
        self._by_id[member.member_id] = member
        self._id = max(self._id, member.member_id)
        return member

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self._by_id.get(member_id)

    def list_all(self, *, search: Optional[str] = None):
        items = list(self._by_id.values())
        if search:
            items = [m for m in items if search.lower() in m.name.lower()]
        return sorted(items, key=lambda m: m.expiration_date)

    def list_expiring_on(self, expiration_date: date):
        return [m for m in self._by_id.values() if m.expiration_date == expiration_date]

    def create_member(self, **fields) -> int:
        self._id += 1
        self._by_id[self._id] = Member(member_id=self._id, **fields)
        return self._id

    def update_contact(self, member_id: int, **fields) -> bool:
        m = self._by_id.get(member_id)
        if not m:
            return False
        self._by_id[member_id] = Member(**{**m.__dict__, **fields})
        return True

    def update_subscription(self, member_id: int, *, membership_plan: str, expiration_date: date) -> bool:
        m = self._by_id.get(member_id)
        if not m:
            return False
        self.subscription_updates.append((member_id, membership_plan, expiration_date))
        self._by_id[member_id] = Member(
            **{**m.__dict__, "membership_plan": membership_plan, "expiration_date": expiration_date}
        )
        return True

    def delete_by_id(self, member_id: int) -> bool:
        return self._by_id.pop(member_id, None) is not None


class InMemoryCheckIns:
    def __init__(self):
        self.events: list[CheckInEvent] = []

    def get_last_for_member(self, member_id: int) -> Optional[CheckInEvent]:
        rows = self.get_recent_for_member(member_id, 1)
        return rows[0] if rows else None

    def get_recent_for_member(self, member_id: int, limit: int):
        items = [e for e in self.events if e.member_id == member_id]
        items.sort(key=lambda e: e.timestamp, reverse=True)
        return items[:limit]

    def append(self, *, member_id: int, timestamp: datetime, result_kind: ScanResultKind) -> int:
        event = CheckInEvent(event_id=len(self.events) + 1, member_id=member_id, timestamp=timestamp, result_kind=result_kind)
        self.events.append(event)
        return event.event_id

    def count_on(self, day: date) -> int:
        return sum(1 for e in self.events if e.timestamp.date() == day)


class InMemoryAnomalies:
    def __init__(self):
        self.records: dict[int, AnomalyRecord] = {}

    def append(self, *, member_id: int, kind: AnomalyKind, timestamp: datetime) -> int:
        anomaly_id = len(self.records) + 1
        self.records[anomaly_id] = AnomalyRecord(anomaly_id=anomaly_id, member_id=member_id, kind=kind, timestamp=timestamp)
        return anomaly_id

    def get_by_id(self, anomaly_id: int) -> Optional[AnomalyRecord]:
        return self.records.get(anomaly_id)

    def list_recent(self, *, resolved: Optional[bool] = None, limit: int = 100):
        items = [r for r in self.records.values() if resolved is None or r.resolved == resolved]
        items.sort(key=lambda r: r.timestamp, reverse=True)
        return items[:limit]

    def mark_resolved(self, anomaly_id: int) -> bool:
        r = self.records.get(anomaly_id)
        if not r or r.resolved:
            return False
        self.records[anomaly_id] = AnomalyRecord(**{**r.__dict__, "resolved": True})
        return True

    def count_unresolved(self) -> int:
        return sum(1 for r in self.records.values() if not r.resolved)


class BrokenStore:
    """Every append fails, as if the database went away mid-request."""

    def __init__(self, inner):
        self._inner = inner

    def __getattr__(self, name):
        return getattr(self._inner, name)

    def append(self, **kwargs):
        raise RuntimeError("database unavailable")


class InMemoryPayments:
    def __init__(self):
        self.payments: list[Payment] = []

    def create_payment(self, **fields) -> int:
        row_id = len(self.payments) + 1
        self.payments.append(Payment(payment_row_id=row_id, **fields))
        return row_id

    def get_by_id(self, payment_row_id: int) -> Optional[Payment]:
        return next((p for p in self.payments if p.payment_row_id == payment_row_id), None)

    def list_payments(self, *, member_id: Optional[int] = None, limit: int = 200):
        items = [p for p in self.payments if member_id is None or p.member_id == member_id]
        return items[:limit]

    def total_between(self, start: date, end: date) -> int:
        return sum(p.amount for p in self.payments if start <= p.payment_date < end)


class InMemoryStaff:
    def __init__(self, roles: Optional[list[StaffRole]] = None):
        self._by_id: dict[int, Staff] = {}
        self._roles = {r.role_id: r for r in (roles or [StaffRole(role_id=1, name="Front Desk")])}

    def add(self, staff: Staff) -> Staff:
        self._by_id[staff.staff_id] = staff
        return staff

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        return self._by_id.get(staff_id)

    def list_all(self, *, status=None, role_name=None):
        items = [s for s in self._by_id.values() if status is None or s.status == status]
        return sorted(items, key=lambda s: s.name)

    def list_roles(self):
        return list(self._roles.values())

    def get_role(self, role_id: int):
        return self._roles.get(role_id)

    def create_staff(self, **fields) -> int:
        staff_id = max(self._by_id, default=0) + 1
        self._by_id[staff_id] = Staff(staff_id=staff_id, **fields)
        return staff_id

    def update_staff(self, staff_id: int, **fields) -> bool:
        s = self._by_id.get(staff_id)
        if not s:
            return False
        self._by_id[staff_id] = Staff(**{**s.__dict__, **fields})
        return True

    def delete_by_id(self, staff_id: int) -> bool:
        return self._by_id.pop(staff_id, None) is not None


class InMemoryStaffAttendance:
    def __init__(self):
        self._by_key: dict[tuple[int, date], StaffAttendance] = {}

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffAttendance]:
        return self._by_key.get((staff_id, work_date))

    def create_checkin(self, *, staff_id: int, work_date: date, check_in_time: datetime, status: StaffAttendanceStatus) -> int:
        attendance_id = len(self._by_key) + 1
        self._by_key[(staff_id, work_date)] = StaffAttendance(
            attendance_id=attendance_id,
            staff_id=staff_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=None,
            status=status,
        )
        return attendance_id

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime, total_hours: float) -> bool:
        for key, rec in self._by_key.items():
            if rec.attendance_id == attendance_id:
                self._by_key[key] = StaffAttendance(
                    **{**rec.__dict__, "check_out_time": check_out_time, "total_hours": total_hours}
                )
                return True
        return False

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None):
        return [
            r
            for r in self._by_key.values()
            if start <= r.work_date <= end and (staff_id is None or r.staff_id == staff_id)
        ]


class RecordingNotifier:
    def __init__(self, *, fail: bool = False):
        self.sent: list[tuple[str, str, str]] = []
        self._fail = fail

    def send(self, recipient: str, subject: str, html: str) -> str:
        if self._fail:
            raise NotificationError("smtp down")
        self.sent.append((recipient, subject, html))
        return f"msg-{len(self.sent)}"


class FakeGateway:
    def __init__(self, secret: str = "test-secret"):
        self.secret = secret
        self.orders: list[dict] = []

    def create_order(self, *, amount: int, currency: str = "INR", receipt=None) -> str:
        self.orders.append({"amount": amount, "currency": currency, "receipt": receipt})
        return f"order_{len(self.orders)}"

    def verify_payment_signature(self, *, order_id: str, payment_id: str, signature: str) -> None:
        verify_signature(order_id, payment_id, signature, self.secret)


def build_member(
    member_id: int = 1,
    *,
    name: str = "Aarav",
    plan: str = "Basic",
    join_date: date = date(2026, 1, 10),
    expiration_date: date = date(2026, 3, 10),
    email: str = "aarav@example.com",
) -> Member:
    return Member(
        member_id=member_id,
        name=name,
        age=30,
        address="Pune",
        email=email,
        phone="9000000001",
        registration_number=f"REG-{member_id:04d}",
        membership_plan=plan,
        join_date=join_date,
        expiration_date=expiration_date,
    )


def build_staff(staff_id: int = 1, *, status: StaffStatus = StaffStatus.ACTIVE) -> Staff:
    return Staff(
        staff_id=staff_id,
        name="Meera",
        email="meera@example.com",
        role_id=1,
        role_name="Front Desk",
        status=status,
        hire_date=date(2025, 6, 1),
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 15, 0)


@pytest.fixture
def members_repo() -> InMemoryMembers:
    return InMemoryMembers()


@pytest.fixture
def active_member(members_repo, fixed_now) -> Member:
    return members_repo.add(build_member(1, expiration_date=fixed_now.date() + timedelta(days=30)))


@pytest.fixture
def expired_member(members_repo, fixed_now) -> Member:
    return members_repo.add(build_member(2, name="Kabir", expiration_date=fixed_now.date() - timedelta(days=1)))


@pytest.fixture
def checkins_repo() -> InMemoryCheckIns:
    return InMemoryCheckIns()


@pytest.fixture
def anomalies_repo() -> InMemoryAnomalies:
    return InMemoryAnomalies()


@pytest.fixture
def payments_repo() -> InMemoryPayments:
    return InMemoryPayments()


@pytest.fixture
def staff_repo() -> InMemoryStaff:
    return InMemoryStaff()


@pytest.fixture
def staff_attendance_repo() -> InMemoryStaffAttendance:
    return InMemoryStaffAttendance()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(fail=True)


@pytest.fixture
def make_member():
    return build_member


@pytest.fixture
def make_staff():
    return build_staff


@pytest.fixture
def broken():
    """Wraps a repository so that its append() raises."""
    return BrokenStore
