from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class EditWindowPolicy:
    """Which dates may still be written.

    ``past_days=0`` locks every date before today; ``None`` disables the lock.
    """

    past_days: Optional[int] = 0
    today: Callable[[], date] = today_local

    @classmethod
    def from_setting(cls, value) -> "EditWindowPolicy":
        days = int(value) if value is not None else 0
        return cls(past_days=days if days >= 0 else None)

    def earliest_editable(self) -> Optional[date]:
        if self.past_days is None:
            return None
        return self.today() - timedelta(days=self.past_days)

    def ensure_editable(self, on_date: date) -> None:
        earliest = self.earliest_editable()
        if earliest is not None and on_date < earliest:
            raise ValidationError(
                f"Attendance for {format_iso_date(on_date)} is locked (editable from {format_iso_date(earliest)})"
            )
