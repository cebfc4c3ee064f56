from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Group:
    """A class/section whose members take attendance together."""

    group_id: str
    name: str
    grade: Optional[str] = None
    is_active: bool = True

    def to_dict(self) -> dict:
        return {"id": self.group_id, "name": self.name, "grade": self.grade}

    @classmethod
    def from_dict(cls, payload: dict) -> "Group":
        return cls(group_id=str(payload["id"]), name=str(payload["name"]), grade=payload.get("grade"))
