from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .calendar_view.controller import register as register_calendar
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .holidays.controller import register as register_holidays
from .payroll.controller import register as register_payroll
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config)
            logger.info("holiday seed ready")

        container = build_container(
            db_config=db_config,
            monthly_base_salary=getattr(settings, "MONTHLY_BASE_SALARY"),
            salary_divisor=getattr(settings, "SALARY_DIVISOR"),
            currency=getattr(settings, "CURRENCY", "RMB"),
        )

    app.extensions["work_tracker"] = container

    register_calendar(app, container)
    register_shifts(app, container)
    register_holidays(app, container)
    register_payroll(app, container)

    return app
