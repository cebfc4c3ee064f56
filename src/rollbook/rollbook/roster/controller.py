from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.http import api_endpoint, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups/<group_id>/roster", methods=["GET"], endpoint="api_roster_page")
    @api_endpoint
    def api_roster_page(group_id: str):
        date_s = request.args.get("date")
        on_date = parse_iso_date(date_s) if date_s else today_local()

        page = container.roster_service.get_page(
            group_id=group_id,
            on_date=on_date,
            page=request.args.get("page", 1),
            page_size=request.args.get("page_size", container.page_size),
        )
        return json_ok(page.to_dict())
