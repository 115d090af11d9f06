from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .container import build_container
from .database.bootstrap import create_schema, ensure_database_exists, list_tables, seed_roles
from .offices.controller import register as register_offices
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    db_config = dict(getattr(settings, "DB_CONFIG"))
    database_url = getattr(settings, "DATABASE_URL", None)

    container = build_container(
        db_config=db_config,
        database_url=database_url,
        echo=bool(getattr(settings, "SQL_ECHO", False)),
    )
    logger.info("settings=%s db=%s", settings_module, container.conn.engine.url.render_as_string(hide_password=True))

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        if not database_url:
            ensure_database_exists(db_config)
        create_schema(container.conn)
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_roles(container.conn)

    app.extensions["container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_offices(app, container)

    @app.teardown_appcontext
    def remove_session(exc: Optional[BaseException] = None) -> None:
        container.conn.remove()

    return app
