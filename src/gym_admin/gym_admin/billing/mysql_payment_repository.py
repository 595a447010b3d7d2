from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Payment
from .repository import PaymentRepository

_COLUMNS = "payment_row_id, member_id, amount, plan, payment_date, expiration_date, payment_id, order_id"


def _to_payment(row: dict) -> Payment:
    return Payment(
        payment_row_id=int(row["payment_row_id"]),
        member_id=int(row["member_id"]),
        amount=int(row["amount"]),
        plan=row["plan"],
        payment_date=row["payment_date"],
        expiration_date=row["expiration_date"],
        payment_id=row.get("payment_id"),
        order_id=row.get("order_id"),
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_payment(
        self,
        *,
        member_id: int,
        amount: int,
        plan: str,
        payment_date: date,
        expiration_date: date,
        payment_id: Optional[str],
        order_id: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(member_id, amount, plan, payment_date, expiration_date, payment_id, order_id)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(member_id), int(amount), plan, payment_date, expiration_date, payment_id, order_id),
            )
            return int(cur.lastrowid)

    def get_by_id(self, payment_row_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments WHERE payment_row_id=%s", (int(payment_row_id),))
            row = fetchone(cur)
            return _to_payment(row) if row else None

    def list_payments(self, *, member_id: Optional[int] = None, limit: int = 200) -> Sequence[Payment]:
        where = ""
        params: list[object] = []
        if member_id is not None:
            where = "WHERE member_id=%s"
            params.append(int(member_id))
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payments {where} ORDER BY payment_date DESC, payment_row_id DESC LIMIT %s",
                tuple(params),
            )
            return [_to_payment(r) for r in fetchall(cur)]

    def total_between(self, start: date, end: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COALESCE(SUM(amount), 0) AS s FROM payments WHERE payment_date >= %s AND payment_date < %s",
                (start, end),
            )
            row = fetchone(cur)
            return int(row["s"]) if row else 0
