from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {
        "SECRET_KEY": getattr(settings, "SECRET_KEY"),
        "DATA_FILE": getattr(settings, "DATA_FILE"),
        "DEBUG": bool(getattr(settings, "DEBUG", False)),
        "TESTING": bool(getattr(settings, "TESTING", False)),
        "LOG_LEVEL": getattr(settings, "LOG_LEVEL", "INFO"),
    }
    values.update(overrides or {})
    app.config.update(values)
    app.secret_key = app.config["SECRET_KEY"]

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="[payroll-system] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_file = Path(app.config["DATA_FILE"])
    logger.info("settings=%s data_file=%s", settings_module, data_file)

    container = build_container(data_file=data_file)
    app.extensions["payroll_system"] = container

    register_employees(app, container)

    return app
