from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups/<group_id>/analytics/summary", methods=["GET"], endpoint="api_daily_summary")
    @api_endpoint
    def api_daily_summary(group_id: str):
        return json_ok([r.to_dict() for r in container.analytics_service.daily_summary(group_id)])

    @app.route("/api/groups/<group_id>/analytics/ranking", methods=["GET"], endpoint="api_ranking")
    @api_endpoint
    def api_ranking(group_id: str):
        return json_ok([r.to_dict() for r in container.analytics_service.ranking(group_id)])
