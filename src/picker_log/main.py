from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .calendar.controller import register as register_calendar
from .common.logging_config import configure_logging
from .config import get_settings_module
from .container import build_container, build_store
from .entries.controller import register as register_entries
from .entries.store import KeyValueStore
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[KeyValueStore] = None) -> Flask:
    """App factory. Pass `store` to bypass the configured backend (tests)."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if store is None:
        backend = getattr(settings, "STORE_BACKEND", "memory")
        db_config = getattr(settings, "DB_CONFIG", {})
        store = build_store(
            backend=backend,
            db_config=db_config,
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
        logger.info("settings=%s store=%s", settings_module, backend)

    container = build_container(store=store)
    app.extensions["picker_log"] = container

    register_entries(app, container)
    register_payroll(app, container)
    register_calendar(app, container)

    return app
