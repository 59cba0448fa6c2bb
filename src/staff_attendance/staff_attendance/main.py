from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_PAGE_LIMIT, DEFAULT_REFRESH_SECONDS, DEFAULT_TIMEZONE
from .report.controller import register as register_report
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(*, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    timezone_name = getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)
    logs_api = getattr(settings, "LOGS_API")
    logger.debug(
        "[staff-attendance] settings=%s tz=%s logs_api=%s",
        settings_module,
        timezone_name,
        logs_api.get("base_url"),
    )

    if container is None:
        container = build_container(
            logs_api=logs_api,
            timezone_name=timezone_name,
            refresh_seconds=int(getattr(settings, "REFRESH_SECONDS", DEFAULT_REFRESH_SECONDS)),
            page_limit=int(getattr(settings, "PAGE_LIMIT", DEFAULT_PAGE_LIMIT)),
        )

    register_report(app, container)
    register_sessions(app, container)

    return app
