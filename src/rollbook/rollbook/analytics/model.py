from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import LOW_ATTENDANCE_THRESHOLD


@dataclass(frozen=True)
class MemberStats:
    """Committed attendance totals for one member of a group (read-model)."""

    member_id: str
    member_name: str
    recorded_days: int
    present_days: int

    @property
    def percentage(self) -> float:
        if self.recorded_days <= 0:
            return 0.0
        return round(self.present_days / self.recorded_days * 100, 2)


@dataclass(frozen=True)
class DailySummaryRow:
    member_name: str
    percentage: float

    def to_dict(self) -> dict:
        return {"member_name": self.member_name, "percentage": self.percentage}

    @classmethod
    def from_dict(cls, payload: dict) -> "DailySummaryRow":
        return cls(member_name=str(payload["member_name"]), percentage=float(payload.get("percentage") or 0))


@dataclass(frozen=True)
class RankingRow:
    rank: int
    member_id: str
    member_name: str
    percentage: float

    @property
    def below_threshold(self) -> bool:
        return self.percentage < LOW_ATTENDANCE_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "member_id": self.member_id,
            "member_name": self.member_name,
            "percentage": self.percentage,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "RankingRow":
        return cls(
            rank=int(payload["rank"]),
            member_id=str(payload["member_id"]),
            member_name=str(payload["member_name"]),
            percentage=float(payload.get("percentage") or 0),
        )


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """Group-wide figures from committed data only; replaced wholesale, never patched."""

    group_id: str
    daily_summary: list[DailySummaryRow] = field(default_factory=list)
    ranking: list[RankingRow] = field(default_factory=list)


@dataclass(frozen=True)
class LiveCounts:
    """Today's counters computed from the unsaved working set."""

    present: int = 0
    absent: int = 0
    late: int = 0
    unmarked: int = 0

    @property
    def loaded(self) -> int:
        return self.present + self.absent + self.late + self.unmarked

    @property
    def presence_percentage(self) -> int:
        return round(self.present / (self.loaded or 1) * 100)
