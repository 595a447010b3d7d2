from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_COLUMNS = """
    member_id, name, age, address, email, phone, registration_number,
    membership_plan, join_date, expiration_date, created_at
"""


def _to_member(row: dict) -> Member:
    return Member(
        member_id=int(row["member_id"]),
        name=row["name"],
        age=int(row.get("age") or 0),
        address=row.get("address") or "",
        email=row["email"],
        phone=row.get("phone") or "",
        registration_number=row["registration_number"],
        membership_plan=row["membership_plan"],
        join_date=row["join_date"],
        expiration_date=row["expiration_date"],
        created_at=row.get("created_at"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def list_all(self, *, search: Optional[str] = None) -> Sequence[Member]:
        sql = f"SELECT {_COLUMNS} FROM members"
        params: tuple = ()
        if search and search.strip():
            like = f"%{search.strip()}%"
            sql += " WHERE name LIKE %s OR email LIKE %s OR phone LIKE %s OR registration_number LIKE %s"
            params = (like, like, like, like)
        sql += " ORDER BY expiration_date ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_member(r) for r in fetchall(cur)]

    def list_expiring_on(self, expiration_date: date) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE expiration_date=%s ORDER BY member_id",
                (expiration_date,),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def create_member(
        self,
        *,
        name: str,
        age: int,
        address: str,
        email: str,
        phone: str,
        registration_number: str,
        membership_plan: str,
        join_date: date,
        expiration_date: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(name, age, address, email, phone, registration_number,
                                    membership_plan, join_date, expiration_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, age, address, email, phone, registration_number, membership_plan, join_date, expiration_date),
            )
            return int(cur.lastrowid)

    def update_contact(
        self,
        member_id: int,
        *,
        name: str,
        age: int,
        address: str,
        email: str,
        phone: str,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET name=%s, age=%s, address=%s, email=%s, phone=%s
                WHERE member_id=%s
                """,
                (name, age, address, email, phone, int(member_id)),
            )
            return cur.rowcount > 0

    def update_subscription(self, member_id: int, *, membership_plan: str, expiration_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE members SET membership_plan=%s, expiration_date=%s WHERE member_id=%s",
                (membership_plan, expiration_date, int(member_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE member_id=%s", (int(member_id),))
            return cur.rowcount > 0
