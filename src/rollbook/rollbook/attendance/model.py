from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusValue:
    """Attendance state of one member on one date."""

    member_id: str
    status: AttendanceStatus = AttendanceStatus.UNMARKED
    notes: Optional[str] = None

    def with_status(self, status: AttendanceStatus, notes: Optional[str] = None) -> "StatusValue":
        return replace(self, status=status, notes=notes if notes is not None else self.notes)

    def to_dict(self) -> dict:
        return {"member_id": self.member_id, "status": self.status.value, "notes": self.notes}

    @classmethod
    def from_dict(cls, payload: dict) -> "StatusValue":
        return cls(
            member_id=str(payload["member_id"]),
            status=AttendanceStatus(payload.get("status") or AttendanceStatus.UNMARKED.value),
            notes=payload.get("notes") or None,
        )


@dataclass(frozen=True)
class CommitResult:
    affected_count: int

    def to_dict(self) -> dict:
        return {"affected_count": self.affected_count}
