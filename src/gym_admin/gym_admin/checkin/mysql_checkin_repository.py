from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..core.enums import AnomalyKind, ScanResultKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AnomalyRecord, CheckInEvent
from .repository import AnomalyRepository, CheckInRepository


def _to_event(row: dict) -> CheckInEvent:
    return CheckInEvent(
        event_id=int(row["event_id"]),
        member_id=int(row["member_id"]),
        timestamp=row["scanned_at"],
        result_kind=ScanResultKind(row["result_kind"]),
    )


def _to_anomaly(row: dict) -> AnomalyRecord:
    return AnomalyRecord(
        anomaly_id=int(row["anomaly_id"]),
        member_id=int(row["member_id"]),
        kind=AnomalyKind(row["kind"]),
        timestamp=row["detected_at"],
        resolved=bool(row.get("resolved")),
        member_name=row.get("member_name"),
    )


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_last_for_member(self, member_id: int) -> Optional[CheckInEvent]:
        rows = self.get_recent_for_member(member_id, 1)
        return rows[0] if rows else None

    def get_recent_for_member(self, member_id: int, limit: int) -> Sequence[CheckInEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, member_id, scanned_at, result_kind
                FROM checkins
                WHERE member_id=%s
                ORDER BY scanned_at DESC
                LIMIT %s
                """,
                (int(member_id), int(limit)),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def append(self, *, member_id: int, timestamp: datetime, result_kind: ScanResultKind) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO checkins(member_id, scanned_at, result_kind) VALUES(%s,%s,%s)",
                (int(member_id), timestamp, result_kind.value),
            )
            return int(cur.lastrowid)

    def count_on(self, day: date) -> int:
        start = datetime.combine(day, datetime.min.time())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS c FROM checkins WHERE scanned_at >= %s AND scanned_at < %s",
                (start, start + timedelta(days=1)),
            )
            row = fetchone(cur)
            return int(row["c"]) if row else 0


class MySQLAnomalyRepository(AnomalyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, *, member_id: int, kind: AnomalyKind, timestamp: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO anomalies(member_id, kind, detected_at, resolved) VALUES(%s,%s,%s,0)",
                (int(member_id), kind.value, timestamp),
            )
            return int(cur.lastrowid)

    def get_by_id(self, anomaly_id: int) -> Optional[AnomalyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.anomaly_id, a.member_id, a.kind, a.detected_at, a.resolved, m.name AS member_name
                FROM anomalies a
                LEFT JOIN members m ON m.member_id = a.member_id
                WHERE a.anomaly_id=%s
                """,
                (int(anomaly_id),),
            )
            row = fetchone(cur)
            return _to_anomaly(row) if row else None

    def list_recent(self, *, resolved: Optional[bool] = None, limit: int = 100) -> Sequence[AnomalyRecord]:
        where = ""
        params: list[object] = []
        if resolved is not None:
            where = "WHERE a.resolved=%s"
            params.append(1 if resolved else 0)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.anomaly_id, a.member_id, a.kind, a.detected_at, a.resolved, m.name AS member_name
                FROM anomalies a
                LEFT JOIN members m ON m.member_id = a.member_id
                {where}
                ORDER BY a.detected_at DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_anomaly(r) for r in fetchall(cur)]

    def mark_resolved(self, anomaly_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE anomalies SET resolved=1 WHERE anomaly_id=%s AND resolved=0", (int(anomaly_id),))
            return cur.rowcount > 0

    def count_unresolved(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS c FROM anomalies WHERE resolved=0")
            row = fetchone(cur)
            return int(row["c"]) if row else 0
