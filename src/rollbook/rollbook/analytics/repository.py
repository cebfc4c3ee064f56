from __future__ import annotations

from typing import Protocol, Sequence

from .model import MemberStats


class AnalyticsRepository(Protocol):
    def member_stats(self, group_id: str) -> Sequence[MemberStats]:
        """Every member of the group, including those with no recorded days."""

        raise NotImplementedError
