"""API entrypoint configuration."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator

from app.core.exceptions import ConfigurationError

from .database import DatabaseConfig


class ApiSettings(DatabaseConfig):
    """Configuration for the Omedeto API service."""

    # Service Info
    SERVICE_NAME: str = Field(default="omedeto-api")
    VERSION: str = Field(default="0.1.0")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3001, ge=1, le=65535)

    # Admin account
    ADMIN_EMAIL: str = Field(..., description="Admin login identity")
    ADMIN_PASSWORD: str = Field(..., description="Admin login password")

    # Messages
    DEFAULT_LOCALE: Literal["pt-BR", "en"] = Field(default="pt-BR")
    POLL_DEFAULT_LIMIT: int = Field(default=50, ge=1, le=500)
    LATEST_DEFAULT_LIMIT: int = Field(default=10, ge=1, le=100)
    STATS_RECENT_DAYS: int = Field(default=7, ge=1)

    @field_validator("ADMIN_EMAIL", "ADMIN_PASSWORD")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Admin credentials have no usable default."""
        if not v or not v.strip():
            raise ValueError("Admin credentials must not be empty")
        return v


@lru_cache
def get_settings() -> ApiSettings:
    """Load settings from the environment, failing loudly when incomplete."""
    try:
        return ApiSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ConfigurationError(
            "Invalid or missing configuration",
            details={"fields": missing},
        ) from e
