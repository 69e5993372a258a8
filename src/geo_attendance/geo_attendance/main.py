from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_RADIUS_METERS
from .database.bootstrap import apply_schema, list_tables, seed_students
from .settings.controller import register as register_settings
from .students.controller import register as register_students

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["DEFAULT_RADIUS_METERS"] = float(getattr(settings, "DEFAULT_RADIUS_METERS", DEFAULT_RADIUS_METERS))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        app.logger.info("seeded %d students", seed_students(db_config))

    container = build_container(
        db_config=db_config,
        default_window_open=bool(getattr(settings, "DEFAULT_WINDOW_OPEN", True)),
    )
    register_all(app, container)
    return app


def register_all(app: Flask, container) -> None:
    register_attendance(app, container)
    register_settings(app, container)
    register_students(app, container)
    register_analytics(app, container)
