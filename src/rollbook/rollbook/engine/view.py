"""Attendance view: the operator's group/date screen.

Two tiers of state are kept apart on purpose:

* ``ledger`` is the last roster page fetched from the server for the current key;
* ``working_set`` is the local copy the operator edits until ``save``.

A background ``refresh`` replaces the ledger but only reseeds a clean working
set. Changing group or date throws the working set away (dirty or not) and
starts again on page 1. Results that arrive for a key the view has already
left are dropped.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..analytics.model import AnalyticsSnapshot, LiveCounts
from ..attendance.model import CommitResult
from ..client.gateway import AttendanceGateway
from ..common.datetime_utils import shift_days, today_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import AttendanceStatus, ViewState
from ..core.exceptions import DomainError, ValidationError
from ..groups.model import Group
from ..roster.model import RosterPage
from .aggregator import AnalyticsAggregator
from .commit import BulkCommitter
from .fetcher import RosterPageFetcher
from .model import ViewKey
from .pagination import PageWindow, PaginationController
from .working_set import WorkingSet

log = logging.getLogger(__name__)


class AttendanceView:
    def __init__(
        self,
        gateway: AttendanceGateway,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        today: Callable[[], date] = today_local,
    ):
        self._gateway = gateway
        self._fetcher = RosterPageFetcher(gateway)
        self._committer = BulkCommitter(gateway)
        self._aggregator = AnalyticsAggregator(gateway)
        self._pager = PaginationController(page_size)
        self._today = today

        self._group_id: Optional[str] = None
        self._date: Optional[date] = None
        self._working_set: Optional[WorkingSet] = None
        self._ledger: Optional[RosterPage] = None
        self._generation = 0

        self.last_error: Optional[DomainError] = None
        self.analytics_error: Optional[DomainError] = None

    # === properties ===

    @property
    def group_id(self) -> Optional[str]:
        return self._group_id

    @property
    def on_date(self) -> Optional[date]:
        return self._date

    @property
    def state(self) -> ViewState:
        return self._pager.state

    @property
    def window(self) -> PageWindow:
        return self._pager.window

    @property
    def page(self) -> int:
        return self._pager.page

    @property
    def working_set(self) -> Optional[WorkingSet]:
        return self._working_set

    @property
    def ledger(self) -> Optional[RosterPage]:
        return self._ledger

    @property
    def dirty(self) -> bool:
        return bool(self._working_set and self._working_set.dirty)

    @property
    def saving(self) -> bool:
        return self._committer.in_flight

    @property
    def analytics(self) -> Optional[AnalyticsSnapshot]:
        return self._aggregator.cached(self._group_id)

    @property
    def analytics_stale(self) -> bool:
        """True between a save and the next analytics fetch for the group."""
        return self._aggregator.is_stale(self._group_id)

    # === selection and navigation ===

    async def list_groups(self) -> Sequence[Group]:
        return await self._gateway.list_groups()

    async def select(self, group_id: str, on_date: Optional[date] = None) -> None:
        """Switch group and/or date: unsaved edits are dropped and page 1 is loaded."""

        group_id = require_non_empty(group_id, "group_id")
        on_date = on_date or self._date or self._today()

        if self.dirty:
            log.info("Discarding unsaved edits for %s", self._working_set.key)

        self._group_id = group_id
        self._date = on_date
        self._working_set = None
        self._ledger = None
        self.analytics_error = None
        self._pager.reset()

        await self._load(page=1)

    async def select_group(self, group_id: str) -> None:
        await self.select(group_id, self._date)

    async def select_date(self, on_date: date) -> None:
        if not self._group_id:
            raise ValidationError("Select a group first")
        await self.select(self._group_id, on_date)

    async def step_date(self, days: int) -> None:
        await self.select_date(shift_days(self._date or self._today(), days))

    async def go_to_page(self, page: int) -> bool:
        """Load another page; pages outside [1, total_pages] are rejected without a fetch."""

        if not self._group_id or not self._pager.can_go_to(page):
            log.debug("Rejected page change to %s (total_pages=%d)", page, self.window.total_pages)
            return False

        if int(page) == self._pager.page and self.state is ViewState.READY:
            return True

        await self._load(page=int(page))
        return self.state is ViewState.READY

    async def next_page(self) -> bool:
        return await self.go_to_page(self._pager.page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self._pager.page - 1)

    async def refresh(self) -> None:
        """Re-fetch the current page; a dirty working set is kept as is."""

        if self._group_id:
            await self._load(page=self._pager.page)

    async def retry(self) -> None:
        await self.refresh()

    # === local edits ===

    def mark(self, member_id: str, status: AttendanceStatus | str, notes: Optional[str] = None) -> bool:
        if self._working_set is None:
            return False
        return self._working_set.mark(member_id, status, notes)

    def mark_all(self, status: AttendanceStatus | str) -> int:
        """Current page only; members on other pages keep their status."""

        if self._working_set is None:
            return 0
        return self._working_set.mark_all(status)

    def live_counts(self) -> LiveCounts:
        return self._aggregator.live_counts(self._working_set)

    # === saving ===

    async def save(self) -> CommitResult:
        """Commit the working set as it is now.

        Edits made while the save is in flight stay dirty for the next save. On
        failure nothing local changes and the error is re-raised.
        """

        ws = self._working_set
        if ws is None:
            raise ValidationError("Nothing loaded to save")

        snapshot = ws.snapshot_for_commit()
        if not snapshot.entries and not self._committer.in_flight:
            log.info("Nothing marked for %s, save skipped", ws.key)
            return CommitResult(affected_count=0)

        try:
            result = await self._committer.commit(snapshot)
        except DomainError as e:
            self.last_error = e
            raise

        self._aggregator.invalidate(snapshot.key.group_id)

        if self._working_set is not ws:
            log.info("Save for %s finished after the view moved on", snapshot.key)
            return result

        ws.mark_committed(snapshot)
        self.last_error = None
        await self.refresh()
        return result

    # === loading ===

    async def _load(self, *, page: int) -> None:
        self._generation += 1
        generation = self._generation
        key = ViewKey(group_id=self._group_id, on_date=self._date, page=page)

        self._pager.begin()

        # page 1 also (re)loads analytics; the roster is applied as soon as it lands
        analytics = asyncio.ensure_future(self._aggregator.load(key.group_id)) if page == 1 else None

        try:
            roster = await self._fetcher.fetch(key, self._pager.page_size)
        except DomainError as e:
            roster = e
        except BaseException:
            if analytics is not None:
                analytics.cancel()
            raise

        applied = False
        if generation != self._generation:
            log.debug("Dropping stale load for %s", key)
        elif isinstance(roster, DomainError):
            self.last_error = roster
            self._pager.fail()
            log.warning("Loading %s failed: %s", key, roster)
        else:
            self._apply(key, roster)
            applied = True

        if analytics is not None:
            await self._settle_analytics(analytics, key.group_id)

        if applied and generation == self._generation and self._pager.page != key.page:
            # roster shrank below the requested page
            await self._load(page=self._pager.page)

    async def _settle_analytics(self, task: "asyncio.Future", group_id: str) -> None:
        try:
            await task
        except DomainError as e:
            if group_id == self._group_id:
                self.analytics_error = e
                log.warning("Analytics for group=%s unavailable: %s", group_id, e)
            return

        if group_id == self._group_id:
            self.analytics_error = None

    def _apply(self, key: ViewKey, roster: RosterPage) -> None:
        self._ledger = roster
        self._pager.complete(key.page, roster.total_count)
        self.last_error = None

        ws = self._working_set
        if ws is not None and ws.key == key and ws.dirty:
            log.info("Keeping unsaved edits for %s over refreshed server copy", key)
            return

        ws = WorkingSet(key)
        ws.seed(roster.members, roster.statuses)
        self._working_set = ws
