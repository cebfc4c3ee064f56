from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Iterable, Optional

from ..analytics.model import AnalyticsSnapshot, DailySummaryRow, LiveCounts, RankingRow
from ..analytics.ranking import ranking_order_key
from ..client.gateway import AttendanceGateway
from ..core.enums import AttendanceStatus
from .working_set import WorkingSet

log = logging.getLogger(__name__)


def normalize_ranking(rows: Iterable[RankingRow]) -> list[RankingRow]:
    """Re-rank 1..n in a total order so equal percentages never swap between calls."""

    ordered = sorted(rows, key=lambda r: ranking_order_key(r.percentage, r.member_name, r.member_id))
    return [
        RankingRow(rank=i, member_id=r.member_id, member_name=r.member_name, percentage=r.percentage)
        for i, r in enumerate(ordered, start=1)
    ]


class AnalyticsAggregator:
    """Group-wide figures from the server, cached per group.

    Never recomputed from an unsaved working set; only ``live_counts`` looks at local edits.
    """

    def __init__(self, gateway: AttendanceGateway):
        self._gateway = gateway
        self._cache: dict[str, AnalyticsSnapshot] = {}
        self._stale: set[str] = set()

    def cached(self, group_id: Optional[str]) -> Optional[AnalyticsSnapshot]:
        return self._cache.get(group_id) if group_id else None

    def invalidate(self, group_id: str) -> None:
        """The cached snapshot stays readable until the next load replaces it."""
        self._stale.add(group_id)

    def is_stale(self, group_id: Optional[str]) -> bool:
        return group_id in self._stale

    async def load(self, group_id: str) -> AnalyticsSnapshot:
        if group_id in self._cache and group_id not in self._stale:
            return self._cache[group_id]

        log.debug("Fetching analytics for group=%s", group_id)
        summary, ranking = await asyncio.gather(
            self._gateway.fetch_daily_summary(group_id),
            self._gateway.fetch_ranking(group_id),
        )
        snapshot = AnalyticsSnapshot(
            group_id=group_id,
            daily_summary=list(summary),
            ranking=normalize_ranking(ranking),
        )
        self._cache[group_id] = snapshot
        self._stale.discard(group_id)
        return snapshot

    async def daily_summary(self, group_id: str) -> list[DailySummaryRow]:
        return (await self.load(group_id)).daily_summary

    async def ranking(self, group_id: str) -> list[RankingRow]:
        return (await self.load(group_id)).ranking

    @staticmethod
    def live_counts(working_set: Optional[WorkingSet]) -> LiveCounts:
        if working_set is None:
            return LiveCounts()

        counts = Counter(v.status for v in working_set.values())
        return LiveCounts(
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            late=counts[AttendanceStatus.LATE],
            unmarked=counts[AttendanceStatus.UNMARKED],
        )
