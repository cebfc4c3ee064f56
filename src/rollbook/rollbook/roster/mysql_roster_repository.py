from __future__ import annotations

from datetime import date

from ..attendance.model import StatusValue
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member, RosterPage
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_page(self, *, group_id: str, on_date: date, limit: int, offset: int) -> RosterPage:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT m.member_id, m.full_name, ar.status, ar.notes
                FROM group_members gm
                JOIN members m ON m.member_id = gm.member_id
                LEFT JOIN attendance_records ar
                    ON ar.member_id = gm.member_id
                    AND ar.group_id = gm.group_id
                    AND ar.attendance_date = %s
                WHERE gm.group_id = %s
                ORDER BY m.full_name ASC, m.member_id ASC
                LIMIT %s OFFSET %s
                """,
                (on_date, group_id, int(limit), int(offset)),
            )
            rows = fetchall(cur)

            cur.execute("SELECT COUNT(*) AS total FROM group_members WHERE group_id=%s", (group_id,))
            total = fetchone(cur)

        return RosterPage(
            members=[Member(member_id=str(r["member_id"]), name=r["full_name"]) for r in rows],
            statuses=[
                StatusValue(
                    member_id=str(r["member_id"]),
                    status=AttendanceStatus(r.get("status") or AttendanceStatus.UNMARKED.value),
                    notes=r.get("notes"),
                )
                for r in rows
            ],
            total_count=int(total["total"]) if total else 0,
        )

    def member_ids_in_group(self, group_id: str, member_ids: list[str]) -> set[str]:
        if not member_ids:
            return set()

        placeholders = ",".join(["%s"] * len(member_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT member_id FROM group_members WHERE group_id=%s AND member_id IN ({placeholders})",
                (group_id, *member_ids),
            )
            return {str(r["member_id"]) for r in fetchall(cur)}
