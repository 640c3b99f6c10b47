"""Logging bootstrap for the ``draw_check`` logger tree."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from .config import LogLevel, get_settings

LOGGER_NAME = "draw_check"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _build_config(level: str) -> dict[str, Any]:
    # Only the package logger is touched so host test runners keep their own setup.
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"draw_check": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%dT%H:%M:%S"}},
        "handlers": {
            "draw_check_stderr": {
                "class": "logging.StreamHandler",
                "formatter": "draw_check",
                "stream": "ext://sys.stderr",
                "level": level,
            }
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["draw_check_stderr"], "level": level, "propagate": False},
        },
    }


def configure_logging(level: LogLevel | str | None = None) -> logging.Logger:
    """Attach a leveled stderr handler to the ``draw_check`` logger and return it."""

    resolved_level = (level or get_settings().log_level).upper()
    dictConfig(_build_config(resolved_level))

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("Logging configured at %s", resolved_level)
    return logger
