from __future__ import annotations

from flask import Flask

from ..common.http import api_endpoint, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/groups", methods=["GET"], endpoint="api_groups")
    @api_endpoint
    def api_groups():
        return json_ok([g.to_dict() for g in container.group_service.list_groups()])
