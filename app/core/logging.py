"""Logging for the Omedeto API.

Development logs are human-oriented (source location when DEBUG is on).
Production logs are one line per record, prefixed with the service name so
they can be told apart in a shared collector.
"""

import logging
import logging.config
import sys
from typing import Any

from app.config.base import BaseSettings

ACCESS_LOGGER = "app.access"

_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _formatters(service: str) -> dict[str, dict[str, str]]:
    return {
        "development": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            "datefmt": _DATEFMT,
        },
        "debug": {
            "format": "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d]: %(message)s",
            "datefmt": _DATEFMT,
        },
        "production": {
            "format": f"%(asctime)s {service} %(levelname)s %(name)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "access": {
            "format": "%(asctime)s access %(message)s",
            "datefmt": _DATEFMT,
        },
    }


def _app_formatter(settings: BaseSettings) -> str:
    if settings.ENVIRONMENT == "production":
        return "production"
    return "debug" if settings.DEBUG else "development"


def build_logging_config(settings: BaseSettings) -> dict[str, Any]:
    """dictConfig payload for the given settings."""
    log_level = settings.LOG_LEVEL.upper()
    production = settings.ENVIRONMENT == "production"
    service = getattr(settings, "SERVICE_NAME", settings.PROJECT_NAME)
    echo_sql = getattr(settings, "DATABASE_ECHO", False)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _formatters(service),
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": _app_formatter(settings),
                "stream": sys.stdout,
            },
            "access": {
                "class": "logging.StreamHandler",
                # Production keeps one line format for everything
                "formatter": "production" if production else "access",
                "stream": sys.stdout,
            },
        },
        "root": {"level": log_level, "handlers": ["console"]},
        "loggers": {
            ACCESS_LOGGER: {"level": "INFO", "handlers": ["access"], "propagate": False},
            # The access middleware replaces uvicorn's own request lines
            "uvicorn.access": {"level": "WARNING"},
            "sqlalchemy.engine": {"level": "INFO" if echo_sql else "WARNING"},
        },
    }


def setup_logging(settings: BaseSettings) -> None:
    logging.config.dictConfig(build_logging_config(settings))
    logging.getLogger(__name__).debug(
        f"Logging configured ({settings.ENVIRONMENT}, level {settings.LOG_LEVEL})"
    )
