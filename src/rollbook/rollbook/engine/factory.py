from __future__ import annotations

import importlib
from types import ModuleType
from typing import Optional

from config import get_settings_module

from ..client.http_gateway import HttpAttendanceGateway
from ..core.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_PAGE_SIZE
from .view import AttendanceView


def build_http_view(settings: Optional[ModuleType] = None) -> AttendanceView:
    """An attendance view talking to the API configured in the active settings module."""

    settings = settings or importlib.import_module(get_settings_module())
    gateway = HttpAttendanceGateway(
        getattr(settings, "API_BASE_URL"),
        api_token=getattr(settings, "API_TOKEN", ""),
        timeout=float(getattr(settings, "HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)),
    )
    return AttendanceView(gateway, page_size=int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE)))
