from __future__ import annotations

from datetime import date
from typing import Protocol

from .model import RosterPage


class RosterRepository(Protocol):
    def get_page(self, *, group_id: str, on_date: date, limit: int, offset: int) -> RosterPage:
        """Members ordered by name then id; status defaults to unmarked when no row exists."""

        raise NotImplementedError

    def member_ids_in_group(self, group_id: str, member_ids: list[str]) -> set[str]:
        raise NotImplementedError
