from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_endpoint, json_error, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups/<group_id>/attendance/<date_s>", methods=["POST"], endpoint="api_commit_attendance")
    @api_endpoint
    def api_commit_attendance(group_id: str, date_s: str):
        payload = request.get_json(silent=True) or {}
        entries = payload.get("entries")
        if not isinstance(entries, list):
            return json_error("Body must be {\"entries\": [...]}", 400)

        result = container.ledger_service.commit(
            group_id=group_id,
            on_date=parse_iso_date(date_s),
            entries=entries,
        )
        return json_ok(result.to_dict())
