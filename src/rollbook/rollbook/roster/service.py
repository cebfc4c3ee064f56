from __future__ import annotations

from datetime import date

from ..common.validators import require_page, require_page_size
from ..core.constants import DEFAULT_PAGE_SIZE
from ..groups.service import GroupService
from .model import RosterPage
from .repository import RosterRepository


class RosterService:
    def __init__(self, roster: RosterRepository, groups: GroupService):
        self._roster = roster
        self._groups = groups

    def get_page(self, *, group_id: str, on_date: date, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> RosterPage:
        page = require_page(page)
        page_size = require_page_size(page_size)
        self._groups.require_group(group_id)

        return self._roster.get_page(
            group_id=group_id,
            on_date=on_date,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
