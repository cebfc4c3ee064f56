from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from ..common.validators import require_page_size
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import ViewState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageWindow:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def clamp(self, page: int) -> int:
        return max(1, min(int(page), max(1, self.total_pages)))

    def contains(self, page: int) -> bool:
        return 1 <= int(page) <= self.total_pages


class PaginationController:
    """Idle -> Loading -> Ready | Error, over a fixed page size."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self._window = PageWindow(page=1, page_size=require_page_size(page_size), total_count=0)
        self._state = ViewState.IDLE

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def window(self) -> PageWindow:
        return self._window

    @property
    def page(self) -> int:
        return self._window.page

    @property
    def page_size(self) -> int:
        return self._window.page_size

    def can_go_to(self, page: int) -> bool:
        return self._window.contains(page)

    def reset(self) -> None:
        """Group or date changed: back to page 1 with an unknown total."""

        self._window = PageWindow(page=1, page_size=self._window.page_size, total_count=0)
        self._state = ViewState.LOADING

    def begin(self) -> None:
        self._state = ViewState.LOADING

    def complete(self, page: int, total_count: int) -> int:
        """Record a successful fetch; returns the page after clamping to the new total."""

        window = replace(self._window, total_count=max(0, int(total_count)))
        self._window = replace(window, page=window.clamp(page))
        self._state = ViewState.READY
        return self._window.page

    def fail(self) -> None:
        self._state = ViewState.ERROR
