from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Callable, Optional, Sequence, TypeVar
from urllib.parse import quote

import requests

from ..analytics.model import DailySummaryRow, RankingRow
from ..attendance.model import CommitResult, StatusValue
from ..common.datetime_utils import format_iso_date
from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import NotFoundError, TransientError, ValidationError
from ..groups.model import Group
from ..roster.model import RosterPage
from .gateway import AttendanceGateway

log = logging.getLogger(__name__)

T = TypeVar("T")


class HttpAttendanceGateway(AttendanceGateway):
    """JSON-over-HTTP client for the rollbook API.

    ``requests`` blocks, so each call runs in a worker thread and the event loop stays free.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_token: str = "",
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        self._headers = {"Accept": "application/json"}
        if api_token:
            self._headers["Authorization"] = f"Bearer {api_token}"

    def _group_path(self, group_id: str, suffix: str) -> str:
        return f"/api/groups/{quote(str(group_id), safe='')}/{suffix}"

    def _request(self, method: str, path: str, *, params: dict | None = None, payload: dict | None = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = self._session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self._headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransientError(f"Network error talking to {self._base_url}") from e

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code >= 400:
            message = body.get("message") if isinstance(body, dict) else None
            message = message or f"HTTP {resp.status_code}"
            if resp.status_code == 404:
                raise NotFoundError(message)
            if resp.status_code in (400, 401, 403, 409, 422):
                raise ValidationError(message)
            log.warning("%s %s returned %s: %s", method, url, resp.status_code, message)
            raise TransientError(message)

        if not isinstance(body, dict) or "data" not in body:
            raise TransientError(f"Malformed response from {url}")
        return body["data"]

    async def _call(self, method: str, path: str, parse: Callable[[Any], T], **kwargs) -> T:
        data = await asyncio.to_thread(self._request, method, path, **kwargs)
        try:
            return parse(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            log.warning("Unexpected payload from %s %s: %s", method, path, e)
            raise TransientError(f"Malformed response from {path}") from e

    async def list_groups(self) -> Sequence[Group]:
        return await self._call("GET", "/api/groups", lambda data: [Group.from_dict(g) for g in data])

    async def fetch_roster_page(self, group_id: str, on_date: date, page: int, page_size: int) -> RosterPage:
        return await self._call(
            "GET",
            self._group_path(group_id, "roster"),
            RosterPage.from_dict,
            params={"date": format_iso_date(on_date), "page": int(page), "page_size": int(page_size)},
        )

    async def fetch_daily_summary(self, group_id: str) -> Sequence[DailySummaryRow]:
        return await self._call(
            "GET",
            self._group_path(group_id, "analytics/summary"),
            lambda data: [DailySummaryRow.from_dict(r) for r in data],
        )

    async def fetch_ranking(self, group_id: str) -> Sequence[RankingRow]:
        return await self._call(
            "GET",
            self._group_path(group_id, "analytics/ranking"),
            lambda data: [RankingRow.from_dict(r) for r in data],
        )

    async def commit_attendance(self, group_id: str, on_date: date, entries: Sequence[StatusValue]) -> CommitResult:
        return await self._call(
            "POST",
            self._group_path(group_id, f"attendance/{format_iso_date(on_date)}"),
            lambda data: CommitResult(affected_count=int(data["affected_count"])),
            payload={"entries": [e.to_dict() for e in entries]},
        )
