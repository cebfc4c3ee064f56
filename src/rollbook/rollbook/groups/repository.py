from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Group


class GroupRepository(Protocol):
    def list_active(self) -> Sequence[Group]:
        raise NotImplementedError

    def get_by_id(self, group_id: str) -> Optional[Group]:
        raise NotImplementedError
