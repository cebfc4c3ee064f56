from __future__ import annotations

from ..groups.service import GroupService
from .model import DailySummaryRow, RankingRow
from .ranking import rank_members
from .repository import AnalyticsRepository


class AnalyticsService:
    def __init__(self, analytics: AnalyticsRepository, groups: GroupService):
        self._analytics = analytics
        self._groups = groups

    def daily_summary(self, group_id: str) -> list[DailySummaryRow]:
        self._groups.require_group(group_id)
        stats = sorted(self._analytics.member_stats(group_id), key=lambda s: (s.member_name, s.member_id))
        return [DailySummaryRow(member_name=s.member_name, percentage=s.percentage) for s in stats]

    def ranking(self, group_id: str) -> list[RankingRow]:
        self._groups.require_group(group_id)
        return rank_members(self._analytics.member_stats(group_id))
