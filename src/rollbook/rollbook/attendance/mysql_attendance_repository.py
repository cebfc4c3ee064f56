from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import StatusValue
from .repository import AttendanceLedgerRepository


class MySQLAttendanceLedgerRepository(AttendanceLedgerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_many(self, *, group_id: str, on_date: date, entries: Sequence[StatusValue]) -> int:
        if not entries:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records(group_id, member_id, attendance_date, status, notes)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), notes=VALUES(notes)
                """,
                [(group_id, e.member_id, on_date, e.status.value, e.notes) for e in entries],
            )
            # rowcount counts updates twice and unchanged rows as zero; report entries written instead.
            return len(entries)
