from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily status of one member; UNMARKED means no ledger row."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    UNMARKED = "unmarked"

    @property
    def is_marked(self) -> bool:
        return self is not AttendanceStatus.UNMARKED


class ViewState(str, Enum):
    """Load state of an attendance view."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
