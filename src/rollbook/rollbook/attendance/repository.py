from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import StatusValue


class AttendanceLedgerRepository(Protocol):
    def upsert_many(self, *, group_id: str, on_date: date, entries: Sequence[StatusValue]) -> int:
        """Insert-or-overwrite rows keyed by (group, member, date) in one transaction.

        Rows of members not in ``entries`` are never touched. Returns the number of entries written.
        """

        raise NotImplementedError
