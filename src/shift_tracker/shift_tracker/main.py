from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .calendars.controller import register as register_calendars
from .core.exceptions import ValidationError
from .shifts.controller import register as register_shifts
from .timezones.controller import register as register_timezones


def _calendar_weeks(value) -> Optional[int]:
    # 0 / empty -> size each month to fit.
    weeks = int(value or 0)
    if weeks < 0:
        raise ValidationError("CALENDAR_WEEKS must not be negative")
    return weeks or None


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CALENDAR_WEEKS"] = _calendar_weeks(getattr(settings, "CALENDAR_WEEKS", 5))
    app.config["DISPLAY_TIMEZONE"] = getattr(settings, "DISPLAY_TIMEZONE", "local")

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.INFO)
        app.logger.info(
            "[shift-tracker] settings=%s store=%s weeks=%s tz=%s",
            settings_module,
            api_config.get("base_url"),
            app.config["CALENDAR_WEEKS"] or "auto",
            app.config["DISPLAY_TIMEZONE"],
        )

    if container is None:
        container = build_container(
            api_config=api_config,
            calendar_weeks=app.config["CALENDAR_WEEKS"],
            display_timezone=app.config["DISPLAY_TIMEZONE"],
        )

    register_calendars(app, container)
    register_shifts(app, container)
    register_timezones(app, container)

    return app
