from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def format_iso_date(value: date) -> str:
    """Calendar-day serialisation shared by client and server (no time, no zone)."""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def shift_days(value: date, days: int) -> date:
    return value + timedelta(days=int(days))
