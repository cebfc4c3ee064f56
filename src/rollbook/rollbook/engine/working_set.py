"""Local, mutable attendance for the page on screen.

The working set is the source of truth until a save commits it. It is seeded
from a fetched roster page, changed only through ``mark``/``mark_all`` and
replaced (never merged) whenever group, date or page change.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import StatusValue
from ..common.validators import require_status
from ..core.enums import AttendanceStatus
from ..roster.model import Member
from .model import CommitSnapshot, ViewKey

log = logging.getLogger(__name__)


class WorkingSet:
    def __init__(self, key: ViewKey):
        self._key = key
        self._members: dict[str, Member] = {}
        self._values: dict[str, StatusValue] = {}
        # dirty == revision moved past the last seed/commit
        self._revision = 0
        self._clean_revision = 0

    @property
    def key(self) -> ViewKey:
        return self._key

    @property
    def dirty(self) -> bool:
        return self._revision != self._clean_revision

    @property
    def members(self) -> list[Member]:
        return list(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: str) -> bool:
        return member_id in self._members

    def get(self, member_id: str) -> Optional[StatusValue]:
        return self._values.get(member_id)

    def values(self) -> list[StatusValue]:
        return [self._values[m] for m in self._members]

    def seed(self, members: Iterable[Member], statuses: Iterable[StatusValue]) -> None:
        """Replace everything with a fresh server copy and clear ``dirty``."""

        self._members = {}
        for m in members:
            if m.member_id in self._members:
                log.debug("Duplicate member %s in roster page, keeping first", m.member_id)
                continue
            self._members[m.member_id] = m

        by_id = {s.member_id: s for s in statuses if s.member_id in self._members}
        self._values = {m: by_id.get(m) or StatusValue(member_id=m) for m in self._members}

        self._revision = 0
        self._clean_revision = 0

    def mark(self, member_id: str, status: AttendanceStatus | str, notes: Optional[str] = None) -> bool:
        """Set one member's status. Unknown members are ignored and return False."""

        current = self._values.get(member_id)
        if current is None:
            log.debug("Ignoring mark for %s: not on page %s", member_id, self._key)
            return False

        self._values[member_id] = current.with_status(require_status(status), notes)
        self._revision += 1
        return True

    def mark_all(self, status: AttendanceStatus | str) -> int:
        """Set every loaded member (this page only) to ``status``; returns how many were set."""

        status = require_status(status)
        if not self._values:
            return 0

        for member_id, current in self._values.items():
            self._values[member_id] = current.with_status(status)
        self._revision += 1
        return len(self._values)

    def snapshot_for_commit(self) -> CommitSnapshot:
        """Marked entries in roster order; ``unmarked`` is left out, never written."""

        entries = tuple(v for v in self.values() if v.status.is_marked)
        return CommitSnapshot(key=self._key, entries=entries, revision=self._revision)

    def mark_committed(self, snapshot: CommitSnapshot) -> bool:
        """Clear ``dirty`` if nothing changed since ``snapshot`` was taken."""

        if snapshot.key != self._key or snapshot.revision != self._revision:
            return False
        self._clean_revision = self._revision
        return True
