"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import LoggingSettings

FRAMEWORK_LOGGER = "testframe"


def _formatter(structured: bool) -> dict[str, Any]:
    """Return the dictConfig formatter fragment for the requested style."""
    if structured:
        return {
            "format": '{{"time": "{asctime}", "level": "{levelname}", '
            '"logger": "{name}", "message": "{message}"}}',
            "style": "{",
        }
    return {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}


def configure_logging(settings: LoggingSettings) -> None:
    """Configure harness logging according to provided settings.

    The root logger receives ``settings.level``; framework loggers (tracker
    sweeps, harness lifecycle) can be tuned separately with
    ``settings.framework_level``.
    """
    dict_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": _formatter(settings.structured)},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": settings.level,
        },
    }
    if settings.framework_level is not None:
        dict_config["loggers"] = {
            FRAMEWORK_LOGGER: {"level": settings.framework_level},
        }

    logging.config.dictConfig(dict_config)


__all__ = ["FRAMEWORK_LOGGER", "configure_logging"]
