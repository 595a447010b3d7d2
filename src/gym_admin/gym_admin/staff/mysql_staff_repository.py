from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import StaffAttendanceStatus, StaffStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Staff, StaffAttendance, StaffRole
from .repository import StaffAttendanceRepository, StaffRepository

_STAFF_SELECT = """
    SELECT s.staff_id, s.name, s.email, s.phone, s.role_id, s.status, s.hire_date,
           s.emergency_contact, s.emergency_phone, s.notes, r.name AS role_name
    FROM staff s
    LEFT JOIN staff_roles r ON r.role_id = s.role_id
"""


def _to_staff(row: dict) -> Staff:
    return Staff(
        staff_id=int(row["staff_id"]),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        role_id=int(row["role_id"]),
        role_name=row.get("role_name"),
        status=StaffStatus(row["status"]),
        hire_date=row["hire_date"],
        emergency_contact=row.get("emergency_contact"),
        emergency_phone=row.get("emergency_phone"),
        notes=row.get("notes"),
    )


def _to_attendance(row: dict) -> StaffAttendance:
    total = row.get("total_hours")
    return StaffAttendance(
        attendance_id=int(row["attendance_id"]),
        staff_id=int(row["staff_id"]),
        work_date=row["work_date"],
        check_in_time=row.get("check_in_time"),
        check_out_time=row.get("check_out_time"),
        status=StaffAttendanceStatus(row["status"]),
        total_hours=float(total) if total is not None else None,
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_STAFF_SELECT + " WHERE s.staff_id=%s", (int(staff_id),))
            row = fetchone(cur)
            return _to_staff(row) if row else None

    def list_all(self, *, status: Optional[StaffStatus] = None, role_name: Optional[str] = None) -> Sequence[Staff]:
        clauses = ["1=1"]
        params: list[object] = []
        if status is not None:
            clauses.append("s.status=%s")
            params.append(status.value)
        if role_name:
            clauses.append("r.name=%s")
            params.append(role_name)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_STAFF_SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY s.name ASC", tuple(params))
            return [_to_staff(r) for r in fetchall(cur)]

    def list_roles(self) -> Sequence[StaffRole]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, name, description FROM staff_roles ORDER BY name")
            return [StaffRole(role_id=int(r["role_id"]), name=r["name"], description=r.get("description")) for r in fetchall(cur)]

    def get_role(self, role_id: int) -> Optional[StaffRole]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, name, description FROM staff_roles WHERE role_id=%s", (int(role_id),))
            r = fetchone(cur)
            if not r:
                return None
            return StaffRole(role_id=int(r["role_id"]), name=r["name"], description=r.get("description"))

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(name, email, phone, role_id, status, hire_date,
                                  emergency_contact, emergency_phone, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, email, phone, int(role_id), status.value, hire_date, emergency_contact, emergency_phone, notes),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET name=%s, email=%s, phone=%s, role_id=%s, status=%s, hire_date=%s,
                    emergency_contact=%s, emergency_phone=%s, notes=%s
                WHERE staff_id=%s
                """,
                (
                    name,
                    email,
                    phone,
                    int(role_id),
                    status.value,
                    hire_date,
                    emergency_contact,
                    emergency_phone,
                    notes,
                    int(staff_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, staff_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff WHERE staff_id=%s", (int(staff_id),))
            return cur.rowcount > 0


class MySQLStaffAttendanceRepository(StaffAttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, staff_id, work_date, check_in_time, check_out_time, total_hours, status
                FROM staff_attendance
                WHERE staff_id=%s AND work_date=%s
                """,
                (int(staff_id), work_date),
            )
            row = fetchone(cur)
            return _to_attendance(row) if row else None

    def create_checkin(
        self, *, staff_id: int, work_date: date, check_in_time: datetime, status: StaffAttendanceStatus
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO staff_attendance(staff_id, work_date, check_in_time, status) VALUES(%s,%s,%s,%s)",
                (int(staff_id), work_date, check_in_time, status.value),
            )
            return int(cur.lastrowid)

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime, total_hours: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE staff_attendance SET check_out_time=%s, total_hours=%s WHERE attendance_id=%s",
                (check_out_time, total_hours, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[StaffAttendance]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if staff_id is not None:
            clauses.append("staff_id=%s")
            params.append(int(staff_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, staff_id, work_date, check_in_time, check_out_time, total_hours, status
                FROM staff_attendance
                WHERE {' AND '.join(clauses)}
                ORDER BY work_date DESC, staff_id ASC
                """,
                tuple(params),
            )
            return [_to_attendance(r) for r in fetchall(cur)]
