from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .common.http import json_ok
from .common.logging_setup import init_logging
from .container import Container, build_container
from .core.constants import DEFAULT_EDIT_WINDOW_DAYS, DEFAULT_PAGE_SIZE
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .groups.controller import register as register_groups
from .roster.controller import register as register_roster

log = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_TOKEN"] = getattr(settings, "API_TOKEN", "")

    init_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            log.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            log.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            page_size=int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE)),
            edit_window_days=int(getattr(settings, "EDIT_WINDOW_DAYS", DEFAULT_EDIT_WINDOW_DAYS)),
        )

    register_groups(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_analytics(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return json_ok({"status": "ok"})

    return app
