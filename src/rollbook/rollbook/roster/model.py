from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import StatusValue


@dataclass(frozen=True)
class Member:
    member_id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.member_id, "name": self.name}

    @classmethod
    def from_dict(cls, payload: dict) -> "Member":
        return cls(member_id=str(payload["id"]), name=str(payload["name"]))


@dataclass(frozen=True)
class RosterPage:
    """One page of a group's members with their status for a single date.

    ``total_count`` is the size of the whole group and does not depend on the date.
    """

    members: list[Member] = field(default_factory=list)
    statuses: list[StatusValue] = field(default_factory=list)
    total_count: int = 0

    def to_dict(self) -> dict:
        return {
            "members": [m.to_dict() for m in self.members],
            "statuses": [s.to_dict() for s in self.statuses],
            "total_count": self.total_count,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "RosterPage":
        return cls(
            members=[Member.from_dict(m) for m in payload.get("members") or []],
            statuses=[StatusValue.from_dict(s) for s in payload.get("statuses") or []],
            total_count=int(payload.get("total_count") or 0),
        )
