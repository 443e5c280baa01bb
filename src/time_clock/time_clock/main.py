from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_PORT
from .database.bootstrap import SCHEMA_PATH, apply_schema, list_tables
from .docs.controller import register as register_docs
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))
    app.config["API_CONTACT_NAME"] = getattr(settings, "API_CONTACT_NAME", None)
    app.config["API_CONTACT_EMAIL"] = getattr(settings, "API_CONTACT_EMAIL", None)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.debug(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_employees(app, container)
    register_attendance(app, container)
    register_docs(app, container)

    return app


def run() -> None:
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server is running on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
