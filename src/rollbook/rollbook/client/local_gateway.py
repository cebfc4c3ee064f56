from __future__ import annotations

import asyncio
from datetime import date
from typing import Sequence

from ..analytics.model import DailySummaryRow, RankingRow
from ..attendance.model import CommitResult, StatusValue
from ..container import Container
from ..groups.model import Group
from ..roster.model import RosterPage
from .gateway import AttendanceGateway


class LocalAttendanceGateway(AttendanceGateway):
    """Serve the gateway contract straight from the service layer, no HTTP hop."""

    def __init__(self, container: Container):
        self._c = container

    async def list_groups(self) -> Sequence[Group]:
        return await asyncio.to_thread(self._c.group_service.list_groups)

    async def fetch_roster_page(self, group_id: str, on_date: date, page: int, page_size: int) -> RosterPage:
        return await asyncio.to_thread(
            self._c.roster_service.get_page,
            group_id=group_id,
            on_date=on_date,
            page=page,
            page_size=page_size,
        )

    async def fetch_daily_summary(self, group_id: str) -> Sequence[DailySummaryRow]:
        return await asyncio.to_thread(self._c.analytics_service.daily_summary, group_id)

    async def fetch_ranking(self, group_id: str) -> Sequence[RankingRow]:
        return await asyncio.to_thread(self._c.analytics_service.ranking, group_id)

    async def commit_attendance(self, group_id: str, on_date: date, entries: Sequence[StatusValue]) -> CommitResult:
        return await asyncio.to_thread(
            self._c.ledger_service.commit,
            group_id=group_id,
            on_date=on_date,
            entries=list(entries),
        )
