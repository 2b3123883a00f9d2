"""Base configuration settings."""
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings


class BaseSettings(PydanticBaseSettings):
    """Base settings for the backend application."""

    # Environment
    ENVIRONMENT: Literal["development", "test", "production"] = Field(
        default="development", description="Application environment"
    )
    DEBUG: bool = Field(default=True, description="Debug mode")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # API Settings
    API_PREFIX: str = Field(default="/api", description="API route prefix")
    PROJECT_NAME: str = Field(default="Omedeto", description="Project name")

    # Security
    SECRET_KEY: str = Field(
        ..., min_length=32, description="Secret key for JWT signing"
    )
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_TOKEN_EXPIRE_HOURS: int = Field(default=24, ge=1, le=168)

    # CORS, comma separated
    CORS_ORIGINS: str = Field(
        default=(
            "http://localhost:5501,"
            "http://127.0.0.1:5500,"
            "http://localhost:3001"
        ),
        description="Allowed cross-origin request sources",
    )

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that the signing key is strong enough."""
        if len(v) < 32:
            raise ValueError("Key must be at least 32 characters long")
        return v

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }
