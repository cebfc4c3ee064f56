from __future__ import annotations

from ..core.constants import MAX_PAGE_SIZE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_page(value, field_name: str = "page") -> int:
    try:
        page = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if page < 1:
        raise ValidationError(f"{field_name} must be >= 1")
    return page


def require_page_size(value) -> int:
    size = require_page(value, "page_size")
    if size > MAX_PAGE_SIZE:
        raise ValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
    return size


def require_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}") from None


def require_marked_status(value) -> AttendanceStatus:
    status = require_status(value)
    if not status.is_marked:
        raise ValidationError("'unmarked' is never written to the ledger")
    return status
