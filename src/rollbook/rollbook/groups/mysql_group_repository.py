from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Group
from .repository import GroupRepository


def _to_group(r: dict) -> Group:
    return Group(
        group_id=str(r["group_id"]),
        name=r["group_name"],
        grade=r.get("grade"),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLGroupRepository(GroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Group]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT group_id, group_name, grade, is_active
                FROM student_groups
                WHERE is_active=1
                ORDER BY group_name
                """
            )
            return [_to_group(r) for r in fetchall(cur)]

    def get_by_id(self, group_id: str) -> Optional[Group]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT group_id, group_name, grade, is_active FROM student_groups WHERE group_id=%s",
                (group_id,),
            )
            r = fetchone(cur)
            return _to_group(r) if r else None
