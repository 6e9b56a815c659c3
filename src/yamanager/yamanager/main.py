from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import configure_logging, get_logger
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .settings.controller import register as register_settings

logger = get_logger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "Starting YAManager dashboard",
        extra={"stage": "startup", "settings": settings_module, "api": api_config.get("base_url")},
    )

    container = build_container(api_config=api_config)

    register_dashboard(app, container)
    register_settings(app, container)

    return app
