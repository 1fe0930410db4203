from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .container import build_container
from .database.bootstrap import apply_schema, ensure_default_settings, list_tables
from .settings import get_settings_module
from .vacations.controller import register as register_vacations

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    vacation_defaults = getattr(settings, "VACATION_DEFAULTS", {})
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        ensure_default_settings(db_config, vacation_defaults)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(db_config=db_config, vacation_defaults=vacation_defaults)
    register_vacations(app, container)

    return app
