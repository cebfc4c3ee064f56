from __future__ import annotations

import logging

from ..attendance.model import StatusValue
from ..client.gateway import AttendanceGateway
from ..common.datetime_utils import format_iso_date
from ..roster.model import RosterPage
from .model import ViewKey

log = logging.getLogger(__name__)


class RosterPageFetcher:
    def __init__(self, gateway: AttendanceGateway):
        self._gateway = gateway

    async def fetch(self, key: ViewKey, page_size: int) -> RosterPage:
        """One page of members with their status for ``key.on_date``.

        Members without a ledger row come back ``unmarked``; that is not an error.
        """

        log.debug("Fetching roster group=%s date=%s page=%d", key.group_id, format_iso_date(key.on_date), key.page)
        page = await self._gateway.fetch_roster_page(key.group_id, key.on_date, key.page, page_size)

        by_id = {s.member_id: s for s in page.statuses}
        statuses = [by_id.get(m.member_id) or StatusValue(member_id=m.member_id) for m in page.members]
        return RosterPage(members=list(page.members), statuses=statuses, total_count=page.total_count)
