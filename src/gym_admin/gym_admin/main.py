from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .billing.controller import register as register_billing
from .checkin.controller import register as register_checkin
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_admin, list_tables
from .members.controller import register as register_members
from .notifications.controller import register as register_notifications
from .reports.controller import register as register_reports
from .staff.controller import register as register_staff
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_DB_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
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
            razorpay_key_id=getattr(settings, "RAZORPAY_KEY_ID", ""),
            razorpay_key_secret=getattr(settings, "RAZORPAY_KEY_SECRET", ""),
            resend_api_key=getattr(settings, "RESEND_API_KEY", ""),
            notify_from=getattr(settings, "NOTIFY_FROM", ""),
            staff_email=getattr(settings, "STAFF_EMAIL", None),
            open_hour=getattr(settings, "OPEN_HOUR", 5),
            close_hour=getattr(settings, "CLOSE_HOUR", 23),
            app_url=getattr(settings, "APP_URL", "http://localhost:5000"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=_DB_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(container.conn, seed_path=_DB_DIR / "seed.sql")
            ensure_demo_admin(container.conn)
            logger.info("demo seed ready")

    register_users(app, container)
    register_members(app, container)
    register_checkin(app, container)
    register_staff(app, container)
    register_billing(app, container)
    register_notifications(app, container)
    register_reports(app, container)

    return app
