from __future__ import annotations

import atexit
import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .core.app_logger import get_logger, setup_logging
from .database.bootstrap import apply_schema, ensure_demo_user, list_tables

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .kids.controller import register as register_kids
from .rates.controller import register as register_rates
from .reimbursement.controller import register as register_reimbursement
from .users.controller import register as register_users

logger = get_logger(__name__)


def register_all(app: Flask, container: Container) -> None:
    app.extensions["daycare_container"] = container

    register_users(app, container)
    register_kids(app, container)
    register_attendance(app, container)
    register_rates(app, container)
    register_reimbursement(app, container)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    # Helpful startup info to tell which database the app is pointed at.
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        meal_windows=getattr(settings, "MEAL_WINDOWS", None),
        export_dir=getattr(settings, "EXPORT_DIR", "exports"),
        export_filename=getattr(settings, "EXPORT_FILENAME", "daycare.xlsx"),
        rate_year_min=getattr(settings, "RATE_YEAR_MIN", 2000),
        rate_year_max=getattr(settings, "RATE_YEAR_MAX", 2100),
    )
    atexit.register(container.close)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(container.conn, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_user(container.conn)
        logger.info("demo account ready")

    register_all(app, container)
    return app
