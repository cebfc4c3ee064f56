from __future__ import annotations

import logging

from ..attendance.model import CommitResult
from ..client.gateway import AttendanceGateway
from ..common.datetime_utils import format_iso_date
from ..core.exceptions import CommitInProgressError
from .model import CommitSnapshot

log = logging.getLogger(__name__)


class BulkCommitter:
    """Sends one snapshot at a time; a second save while one is in flight is rejected."""

    def __init__(self, gateway: AttendanceGateway):
        self._gateway = gateway
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def commit(self, snapshot: CommitSnapshot) -> CommitResult:
        if self._in_flight:
            raise CommitInProgressError("A save is already in progress")

        if not snapshot.entries:
            return CommitResult(affected_count=0)

        key = snapshot.key
        self._in_flight = True
        try:
            result = await self._gateway.commit_attendance(key.group_id, key.on_date, list(snapshot.entries))
        except Exception:
            log.warning("Commit of %d entries for group=%s date=%s failed", len(snapshot), key.group_id, format_iso_date(key.on_date))
            raise
        finally:
            self._in_flight = False

        log.info("Committed %d entries for group=%s date=%s", result.affected_count, key.group_id, format_iso_date(key.on_date))
        return result
