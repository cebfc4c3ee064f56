from __future__ import annotations

import re

from ..core.exceptions import NotFoundError
from .model import Group
from .repository import GroupRepository

_EARLY_YEARS = ("Nursery", "L.K.G.", "U.K.G.")


def group_sort_key(group: Group) -> tuple[int, str]:
    """Nursery, L.K.G., U.K.G. first, then "Grade N" numerically, then the rest; ties by name."""

    name = group.name
    for index, label in enumerate(_EARLY_YEARS):
        if label in name:
            return index, name

    if "Grade" in name:
        digits = re.sub(r"\D", "", name)
        return 10 + (int(digits) if digits else 99), name

    return 1000, name


class GroupService:
    def __init__(self, groups: GroupRepository):
        self._groups = groups

    def list_groups(self) -> list[Group]:
        return sorted(self._groups.list_active(), key=group_sort_key)

    def require_group(self, group_id: str) -> Group:
        group = self._groups.get_by_id(group_id) if group_id else None
        if not group:
            raise NotFoundError(f"Group {group_id!r} not found")
        return group
