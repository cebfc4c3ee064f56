from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import MemberStats
from .repository import AnalyticsRepository


class MySQLAnalyticsRepository(AnalyticsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def member_stats(self, group_id: str) -> Sequence[MemberStats]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    m.member_id, m.full_name,
                    COUNT(ar.record_id) AS recorded_days,
                    COALESCE(SUM(ar.status = 'present'), 0) AS present_days
                FROM group_members gm
                JOIN members m ON m.member_id = gm.member_id
                LEFT JOIN attendance_records ar
                    ON ar.member_id = gm.member_id AND ar.group_id = gm.group_id
                WHERE gm.group_id = %s
                GROUP BY m.member_id, m.full_name
                ORDER BY m.full_name ASC, m.member_id ASC
                """,
                (group_id,),
            )
            return [
                MemberStats(
                    member_id=str(r["member_id"]),
                    member_name=r["full_name"],
                    recorded_days=int(r["recorded_days"] or 0),
                    present_days=int(r["present_days"] or 0),
                )
                for r in fetchall(cur)
            ]
