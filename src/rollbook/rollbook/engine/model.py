from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..attendance.model import StatusValue


@dataclass(frozen=True)
class ViewKey:
    """Group, date and page together decide which working set is on screen."""

    group_id: str
    on_date: date
    page: int = 1


@dataclass(frozen=True)
class CommitSnapshot:
    key: ViewKey
    entries: tuple[StatusValue, ...] = field(default_factory=tuple)
    revision: int = 0

    def __len__(self) -> int:
        return len(self.entries)
