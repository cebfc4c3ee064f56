from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import current_app, jsonify, request

from ..core.exceptions import DomainError, NotFoundError, TransientError, ValidationError

log = logging.getLogger(__name__)


def json_ok(data, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, TransientError):
        return 503
    return 500


def api_endpoint(view):
    """Check the shared API token and translate domain errors into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        token = current_app.config.get("API_TOKEN")
        if token:
            supplied = request.headers.get("Authorization", "")
            if not hmac.compare_digest(supplied, f"Bearer {token}"):
                return json_error("Unauthorized", 401)

        try:
            return view(*args, **kwargs)
        except DomainError as e:
            status = status_for(e)
            if status >= 500:
                log.warning("%s %s failed: %s", request.method, request.path, e)
            return json_error(str(e), status)

    return wrapper
