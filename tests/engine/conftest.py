from __future__ import annotations

import asyncio

import pytest

from src.rollbook.rollbook.analytics.model import DailySummaryRow, RankingRow
from src.rollbook.rollbook.attendance.model import CommitResult, StatusValue
from src.rollbook.rollbook.core.enums import AttendanceStatus
from src.rollbook.rollbook.core.exceptions import NotFoundError
from src.rollbook.rollbook.groups.model import Group
from src.rollbook.rollbook.roster.model import Member, RosterPage


class FakeGateway:
    """Async in-memory stand-in for the remote API.

    ``*_errors`` lists are raised (and consumed) one per call; ``commit_gate`` and
    ``page_gates`` and ``analytics_gate`` hold a call until the test sets the event.
    """

    def __init__(self):
        self.groups: dict[str, list[Member]] = {}
        self.ledger: dict[tuple[str, str, object], StatusValue] = {}
        self.calls: list[tuple] = []
        self.roster_errors: list[Exception] = []
        self.commit_errors: list[Exception] = []
        self.analytics_errors: list[Exception] = []
        self.commit_gate: asyncio.Event | None = None
        self.page_gates: dict[int, asyncio.Event] = {}
        self.analytics_gate: asyncio.Event | None = None

    def add_group(self, group_id: str, member_count: int):
        self.groups[group_id] = [Member(member_id=f"{group_id}-m{i:03d}", name=f"Member {i:03d}") for i in range(1, member_count + 1)]

    def calls_named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]

    async def list_groups(self):
        return [Group(group_id=g, name=g) for g in self.groups]

    async def fetch_roster_page(self, group_id, on_date, page, page_size):
        self.calls.append(("roster", group_id, on_date, page, page_size))
        gate = self.page_gates.get(page)
        if gate is not None:
            await gate.wait()
        if self.roster_errors:
            raise self.roster_errors.pop(0)
        if group_id not in self.groups:
            raise NotFoundError(f"Group {group_id!r} not found")

        members = self.groups[group_id]
        chunk = members[(page - 1) * page_size : page * page_size]
        return RosterPage(
            members=chunk,
            statuses=[self.ledger[(group_id, m.member_id, on_date)] for m in chunk if (group_id, m.member_id, on_date) in self.ledger],
            total_count=len(members),
        )

    async def commit_attendance(self, group_id, on_date, entries):
        self.calls.append(("commit", group_id, on_date, tuple(entries)))
        if self.commit_gate is not None:
            await self.commit_gate.wait()
        if self.commit_errors:
            raise self.commit_errors.pop(0)
        for e in entries:
            self.ledger[(group_id, e.member_id, on_date)] = e
        return CommitResult(affected_count=len(entries))

    def _percentages(self, group_id):
        out = []
        for m in self.groups.get(group_id, []):
            rows = [v for (g, mid, _), v in self.ledger.items() if g == group_id and mid == m.member_id]
            present = sum(1 for r in rows if r.status == AttendanceStatus.PRESENT)
            out.append((m, round(present / len(rows) * 100, 2) if rows else 0.0))
        return out

    async def fetch_daily_summary(self, group_id):
        self.calls.append(("summary", group_id))
        if self.analytics_gate is not None:
            await self.analytics_gate.wait()
        if self.analytics_errors:
            raise self.analytics_errors.pop(0)
        return [DailySummaryRow(member_name=m.name, percentage=p) for m, p in self._percentages(group_id)]

    async def fetch_ranking(self, group_id):
        self.calls.append(("ranking", group_id))
        # reversed and all ranked 1 so the client has to impose its own order
        return [
            RankingRow(rank=1, member_id=m.member_id, member_name=m.name, percentage=p)
            for m, p in reversed(self._percentages(group_id))
        ]


@pytest.fixture
def gateway():
    return FakeGateway()
