from __future__ import annotations

from datetime import date

import pytest

from src.rollbook.rollbook.analytics.model import MemberStats
from src.rollbook.rollbook.attendance.model import StatusValue
from src.rollbook.rollbook.attendance.policy import EditWindowPolicy
from src.rollbook.rollbook.container import wire_container
from src.rollbook.rollbook.core.enums import AttendanceStatus
from src.rollbook.rollbook.groups.model import Group
from src.rollbook.rollbook.roster.model import Member, RosterPage


class InMemoryStore:
    """Groups, roster, ledger and analytics repositories over plain dicts."""

    def __init__(self):
        self.groups: dict[str, Group] = {}
        self.members: dict[str, list[Member]] = {}
        self.ledger: dict[tuple[str, str, date], StatusValue] = {}
        self.upsert_calls = 0

    def add_group(self, group_id: str, name: str, *, member_count: int = 0, members: list[Member] | None = None, active=True):
        self.groups[group_id] = Group(group_id=group_id, name=name, is_active=active)
        if members is None:
            members = [Member(member_id=f"m{i}", name=f"Member {i:03d}") for i in range(1, member_count + 1)]
        self.members[group_id] = list(members)
        return self.groups[group_id]

    # GroupRepository
    def list_active(self):
        return [g for g in self.groups.values() if g.is_active]

    def get_by_id(self, group_id):
        return self.groups.get(group_id)

    # RosterRepository
    def get_page(self, *, group_id, on_date, limit, offset):
        ordered = sorted(self.members.get(group_id, []), key=lambda m: (m.name, m.member_id))
        chunk = ordered[offset : offset + limit]
        return RosterPage(
            members=chunk,
            statuses=[
                self.ledger.get((group_id, m.member_id, on_date)) or StatusValue(member_id=m.member_id)
                for m in chunk
            ],
            total_count=len(ordered),
        )

    def member_ids_in_group(self, group_id, member_ids):
        known = {m.member_id for m in self.members.get(group_id, [])}
        return {m for m in member_ids if m in known}

    # AttendanceLedgerRepository
    def upsert_many(self, *, group_id, on_date, entries):
        self.upsert_calls += 1
        for e in entries:
            self.ledger[(group_id, e.member_id, on_date)] = e
        return len(entries)

    # AnalyticsRepository
    def member_stats(self, group_id):
        out = []
        for m in self.members.get(group_id, []):
            rows = [v for (g, mid, _), v in self.ledger.items() if g == group_id and mid == m.member_id]
            out.append(
                MemberStats(
                    member_id=m.member_id,
                    member_name=m.name,
                    recorded_days=len(rows),
                    present_days=sum(1 for r in rows if r.status == AttendanceStatus.PRESENT),
                )
            )
        return out


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def container(store):
    return wire_container(
        groups_repo=store,
        roster_repo=store,
        ledger_repo=store,
        analytics_repo=store,
        policy=EditWindowPolicy(past_days=None),
    )
