from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.mysql_analytics_repository import MySQLAnalyticsRepository
from .analytics.repository import AnalyticsRepository
from .analytics.service import AnalyticsService
from .attendance.mysql_attendance_repository import MySQLAttendanceLedgerRepository
from .attendance.policy import EditWindowPolicy
from .attendance.repository import AttendanceLedgerRepository
from .attendance.service import LedgerService
from .core.constants import DEFAULT_EDIT_WINDOW_DAYS, DEFAULT_PAGE_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .groups.mysql_group_repository import MySQLGroupRepository
from .groups.repository import GroupRepository
from .groups.service import GroupService
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository
from .roster.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    groups_repo: GroupRepository
    roster_repo: RosterRepository
    ledger_repo: AttendanceLedgerRepository
    analytics_repo: AnalyticsRepository

    group_service: GroupService
    roster_service: RosterService
    ledger_service: LedgerService
    analytics_service: AnalyticsService

    page_size: int = DEFAULT_PAGE_SIZE


def wire_container(
    *,
    groups_repo: GroupRepository,
    roster_repo: RosterRepository,
    ledger_repo: AttendanceLedgerRepository,
    analytics_repo: AnalyticsRepository,
    policy: EditWindowPolicy | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    group_service = GroupService(groups_repo)
    roster_service = RosterService(roster_repo, group_service)
    ledger_service = LedgerService(ledger_repo, roster_repo, group_service, policy=policy)
    analytics_service = AnalyticsService(analytics_repo, group_service)

    return Container(
        conn=conn,
        groups_repo=groups_repo,
        roster_repo=roster_repo,
        ledger_repo=ledger_repo,
        analytics_repo=analytics_repo,
        group_service=group_service,
        roster_service=roster_service,
        ledger_service=ledger_service,
        analytics_service=analytics_service,
        page_size=int(page_size),
    )


def build_container(
    *,
    db_config: dict,
    page_size: int = DEFAULT_PAGE_SIZE,
    edit_window_days: int = DEFAULT_EDIT_WINDOW_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        groups_repo=MySQLGroupRepository(conn),
        roster_repo=MySQLRosterRepository(conn),
        ledger_repo=MySQLAttendanceLedgerRepository(conn),
        analytics_repo=MySQLAnalyticsRepository(conn),
        policy=EditWindowPolicy.from_setting(edit_window_days),
        page_size=page_size,
        conn=conn,
    )
