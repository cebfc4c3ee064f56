from __future__ import annotations

from typing import Iterable

from .model import MemberStats, RankingRow


def ranking_order_key(percentage: float, member_name: str, member_id: str) -> tuple:
    # Descending percentage; name then id make the order total.
    return -float(percentage), member_name, member_id


def rank_members(stats: Iterable[MemberStats]) -> list[RankingRow]:
    ordered = sorted(stats, key=lambda s: ranking_order_key(s.percentage, s.member_name, s.member_id))
    return [
        RankingRow(rank=i, member_id=s.member_id, member_name=s.member_name, percentage=s.percentage)
        for i, s in enumerate(ordered, start=1)
    ]
