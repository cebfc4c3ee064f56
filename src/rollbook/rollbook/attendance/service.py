from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..common.datetime_utils import format_iso_date
from ..common.validators import require_marked_status, require_non_empty
from ..core.exceptions import ValidationError
from ..groups.service import GroupService
from ..roster.repository import RosterRepository
from .model import CommitResult, StatusValue
from .policy import EditWindowPolicy
from .repository import AttendanceLedgerRepository

log = logging.getLogger(__name__)


class LedgerService:
    """Server side of the bulk commit: validates a batch and upserts it atomically."""

    def __init__(
        self,
        ledger: AttendanceLedgerRepository,
        roster: RosterRepository,
        groups: GroupService,
        *,
        policy: EditWindowPolicy | None = None,
    ):
        self._ledger = ledger
        self._roster = roster
        self._groups = groups
        self._policy = policy or EditWindowPolicy()

    def commit(self, *, group_id: str, on_date: date, entries: Iterable[dict | StatusValue]) -> CommitResult:
        self._groups.require_group(group_id)
        self._policy.ensure_editable(on_date)

        normalized = self._normalize(entries)
        if not normalized:
            raise ValidationError("Nothing to save: no marked entries")

        member_ids = [e.member_id for e in normalized]
        known = self._roster.member_ids_in_group(group_id, member_ids)
        strangers = [m for m in member_ids if m not in known]
        if strangers:
            raise ValidationError(f"Members not in group: {', '.join(sorted(strangers))}")

        affected = self._ledger.upsert_many(group_id=group_id, on_date=on_date, entries=normalized)
        log.info("Committed %d attendance entries for group=%s date=%s", affected, group_id, format_iso_date(on_date))
        return CommitResult(affected_count=affected)

    def _normalize(self, entries: Iterable[dict | StatusValue]) -> list[StatusValue]:
        out: list[StatusValue] = []
        seen: set[str] = set()

        for raw in entries:
            if isinstance(raw, StatusValue):
                member_id, status, notes = raw.member_id, raw.status, raw.notes
            elif isinstance(raw, dict):
                member_id, status, notes = raw.get("member_id"), raw.get("status"), raw.get("notes")
            else:
                raise ValidationError("Each entry must be an object with member_id and status")

            member_id = require_non_empty(member_id, "member_id")
            if member_id in seen:
                raise ValidationError(f"Duplicate entry for member {member_id}")
            seen.add(member_id)

            out.append(
                StatusValue(
                    member_id=member_id,
                    status=require_marked_status(status),
                    notes=(str(notes).strip() or None) if notes else None,
                )
            )

        return out
