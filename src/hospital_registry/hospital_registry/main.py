from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import configure_logging, get_logger
from .container import build_container
from .registry.controller import register as register_registry


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger = get_logger("app")

    demo_staff = list(getattr(settings, "DEMO_STAFF", [])) if getattr(settings, "SEED_DEMO_STAFF", False) else []
    container = build_container(demo_staff=demo_staff)
    logger.info("settings=%s staff=%d", settings_module, len(container.registry))

    register_registry(app, container)
    app.extensions["hospital_registry"] = container

    return app
