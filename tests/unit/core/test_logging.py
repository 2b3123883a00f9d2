"""Tests for logging configuration."""
import logging

from app.config.api import ApiSettings
from app.core.logging import ACCESS_LOGGER, build_logging_config, setup_logging

DB_URL = "sqlite:///omedeto.sqlite3"


def make_settings(database_url: str, **overrides) -> ApiSettings:
    values = {
        "ENVIRONMENT": "test",
        "DEBUG": False,
        "SECRET_KEY": "logging_test_secret_key_0123456789abcdef",
        "DATABASE_URL": database_url,
        "ADMIN_EMAIL": "rh.admin",
        "ADMIN_PASSWORD": "secret",
    }
    values.update(overrides)
    return ApiSettings(_env_file=None, **values)


def test_development_formatter():
    config = build_logging_config(make_settings(DB_URL, ENVIRONMENT="development"))

    assert config["handlers"]["console"]["formatter"] == "development"
    assert config["handlers"]["access"]["formatter"] == "access"


def test_debug_adds_source_location():
    config = build_logging_config(make_settings(DB_URL, ENVIRONMENT="development", DEBUG=True))

    assert config["handlers"]["console"]["formatter"] == "debug"
    assert "%(lineno)d" in config["formatters"]["debug"]["format"]


def test_production_tags_records_with_service_name():
    config = build_logging_config(
        make_settings(DB_URL, ENVIRONMENT="production", SERVICE_NAME="omedeto-rh", DEBUG=True)
    )

    assert config["handlers"]["console"]["formatter"] == "production"
    assert config["handlers"]["access"]["formatter"] == "production"
    assert "omedeto-rh" in config["formatters"]["production"]["format"]


def test_sql_echo_raises_engine_log_level():
    quiet = build_logging_config(make_settings(DB_URL))
    echo = build_logging_config(make_settings(DB_URL, DATABASE_ECHO=True))

    assert quiet["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert echo["loggers"]["sqlalchemy.engine"]["level"] == "INFO"


def test_setup_logging_applies_level_and_access_logger():
    setup_logging(make_settings(DB_URL, LOG_LEVEL="ERROR"))

    assert logging.getLogger().level == logging.ERROR
    access = logging.getLogger(ACCESS_LOGGER)
    assert access.propagate is False
    assert access.level == logging.INFO
