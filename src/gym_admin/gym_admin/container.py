from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .billing.gateway import RazorpayGateway
from .billing.mysql_payment_repository import MySQLPaymentRepository
from .billing.service import BillingService
from .checkin.classifier import AnomalyClassifier
from .checkin.mysql_checkin_repository import MySQLAnomalyRepository, MySQLCheckInRepository
from .checkin.rules.base import OperatingHours
from .checkin.service import CheckInService
from .core.constants import DEFAULT_CLOSE_HOUR, DEFAULT_OPEN_HOUR
from .database.connection import DatabaseConnection, DBConfig
from .members.mysql_member_repository import MySQLMemberRepository
from .members.service import MemberService
from .notifications.notifier import EmailNotifier, LogNotifier, Notifier
from .notifications.service import ReminderService
from .reports.service import DashboardService
from .staff.mysql_staff_repository import MySQLStaffAttendanceRepository, MySQLStaffRepository
from .staff.service import StaffAttendanceService, StaffService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    member_service: MemberService
    checkin_service: CheckInService
    billing_service: BillingService
    staff_service: StaffService
    staff_attendance_service: StaffAttendanceService
    reminder_service: ReminderService
    dashboard_service: DashboardService

    app_url: str = "http://localhost:5000"
    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    db_config: dict,
    razorpay_key_id: str = "",
    razorpay_key_secret: str = "",
    resend_api_key: str = "",
    notify_from: str = "",
    staff_email: Optional[str] = None,
    open_hour: int = DEFAULT_OPEN_HOUR,
    close_hour: int = DEFAULT_CLOSE_HOUR,
    app_url: str = "http://localhost:5000",
) -> Container:
    """Wire every client explicitly; services never reach for globals."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    members_repo = MySQLMemberRepository(conn)
    checkins_repo = MySQLCheckInRepository(conn)
    anomalies_repo = MySQLAnomalyRepository(conn)
    payments_repo = MySQLPaymentRepository(conn)
    staff_repo = MySQLStaffRepository(conn)
    staff_attendance_repo = MySQLStaffAttendanceRepository(conn)

    notifier: Notifier = EmailNotifier(resend_api_key, notify_from) if resend_api_key else LogNotifier()
    gateway = RazorpayGateway(razorpay_key_id, razorpay_key_secret)
    classifier = AnomalyClassifier(hours=OperatingHours(open_hour=int(open_hour), close_hour=int(close_hour)))

    member_service = MemberService(members_repo)

    return Container(
        auth_service=AuthService(users_repo),
        member_service=member_service,
        checkin_service=CheckInService(
            members_repo,
            checkins_repo,
            anomalies_repo,
            classifier=classifier,
            notifier=notifier,
            staff_email=staff_email,
        ),
        billing_service=BillingService(gateway, payments_repo, members_repo),
        staff_service=StaffService(staff_repo),
        staff_attendance_service=StaffAttendanceService(staff_repo, staff_attendance_repo),
        reminder_service=ReminderService(member_service, notifier),
        dashboard_service=DashboardService(members_repo, checkins_repo, anomalies_repo, payments_repo),
        app_url=app_url,
        conn=conn,
    )
