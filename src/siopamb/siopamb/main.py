from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .admin.controller import register as register_admin
from .auth.controller import register as register_auth
from .container import Container, build_container
from .core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_PASSWORD_MIN_LENGTH, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            password_min_length=int(getattr(settings, "PASSWORD_MIN_LENGTH", DEFAULT_PASSWORD_MIN_LENGTH)),
            admin_default_password=str(getattr(settings, "ADMIN_DEFAULT_PASSWORD", DEFAULT_ADMIN_PASSWORD)),
        )

    app.extensions["siopamb"] = container

    @app.context_processor
    def inject_current_user():
        return {"current_user": container.auth_service.current_user()}

    register_auth(app, container)
    register_reports(app, container)
    register_admin(app, container)

    return app
