from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..analytics.model import DailySummaryRow, RankingRow
from ..attendance.model import CommitResult, StatusValue
from ..groups.model import Group
from ..roster.model import RosterPage


class AttendanceGateway(Protocol):
    """Remote collaborators consumed by the attendance view.

    Every call suspends; failures surface as NotFoundError, ValidationError or TransientError.
    """

    async def list_groups(self) -> Sequence[Group]:
        raise NotImplementedError

    async def fetch_roster_page(self, group_id: str, on_date: date, page: int, page_size: int) -> RosterPage:
        raise NotImplementedError

    async def fetch_daily_summary(self, group_id: str) -> Sequence[DailySummaryRow]:
        raise NotImplementedError

    async def fetch_ranking(self, group_id: str) -> Sequence[RankingRow]:
        raise NotImplementedError

    async def commit_attendance(self, group_id: str, on_date: date, entries: Sequence[StatusValue]) -> CommitResult:
        raise NotImplementedError
