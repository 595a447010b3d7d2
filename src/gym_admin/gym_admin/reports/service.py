from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date

from ..billing.repository import PaymentRepository
from ..checkin.repository import AnomalyRepository, CheckInRepository
from ..core.enums import MembershipStatus
from ..members.repository import MemberRepository


@dataclass(frozen=True)
class DashboardMetrics:
    total_members: int
    active_members: int
    expiring_soon: int
    expired_members: int
    checkins_today: int
    unresolved_anomalies: int
    monthly_revenue: int

    def to_dict(self) -> dict:
        return asdict(self)


class DashboardService:
    """Read-model for the dashboard overview cards."""

    def __init__(
        self,
        members: MemberRepository,
        checkins: CheckInRepository,
        anomalies: AnomalyRepository,
        payments: PaymentRepository,
    ):
        self._members = members
        self._checkins = checkins
        self._anomalies = anomalies
        self._payments = payments

    def metrics(self, *, today: date | None = None) -> DashboardMetrics:
        today = today or date.today()

        counts = {status: 0 for status in MembershipStatus}
        members = self._members.list_all()
        for m in members:
            counts[m.status_on(today)] += 1

        month_start = today.replace(day=1)
        next_month = date(today.year + 1, 1, 1) if today.month == 12 else date(today.year, today.month + 1, 1)

        return DashboardMetrics(
            total_members=len(members),
            active_members=counts[MembershipStatus.ACTIVE],
            expiring_soon=counts[MembershipStatus.EXPIRING_SOON],
            expired_members=counts[MembershipStatus.EXPIRED],
            checkins_today=self._checkins.count_on(today),
            unresolved_anomalies=self._anomalies.count_unresolved(),
            monthly_revenue=self._payments.total_between(month_start, next_month),
        )
