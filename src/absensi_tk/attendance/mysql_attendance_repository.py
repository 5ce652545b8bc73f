from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, student_id, `date`, status, note FROM attendance")
            rows = fetchall(cur)

        out: list[AttendanceRecord] = []
        for r in rows:
            status = AttendanceStatus.parse(r.get("status"))
            if status is None:
                logger.warning("Skipping attendance row %s: unknown status %r", r.get("id"), r.get("status"))
                continue
            out.append(
                AttendanceRecord(
                    record_id=str(r["id"]),
                    student_id=str(r["student_id"]),
                    date=normalize_mysql_date(r["date"]),
                    status=status,
                    note=r.get("note") or "",
                )
            )
        return out

    def upsert(self, records: Sequence[AttendanceRecord]) -> None:
        if not records:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance(id, student_id, `date`, status, note)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), note=VALUES(note)
                """,
                [(r.record_id, r.student_id, r.date, r.status.value, r.note or "") for r in records],
            )
