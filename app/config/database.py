"""Database configuration."""
from typing import Literal

from pydantic import Field, field_validator

from .base import BaseSettings

SslMode = Literal["disable", "allow", "prefer", "require", "verify-ca", "verify-full"]


class DatabaseConfig(BaseSettings):
    """Database configuration settings."""

    DATABASE_URL: str = Field(..., description="PostgreSQL (or SQLite) database URL")
    DATABASE_SSL_MODE: SslMode = Field(
        default="require", description="Transport security mode for PostgreSQL"
    )
    DATABASE_POOL_SIZE: int = Field(
        default=5, ge=1, le=20, description="Database connection pool size"
    )
    DATABASE_MAX_OVERFLOW: int = Field(
        default=10, ge=0, le=50, description="Database max overflow connections"
    )
    DATABASE_ECHO: bool = Field(default=False, description="Echo SQL queries")
    DATABASE_AUTO_CREATE: bool = Field(
        default=True, description="Create the messages table at startup"
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL format."""
        if not v.startswith(("postgresql://", "postgresql+psycopg2://", "sqlite://")):
            raise ValueError("DATABASE_URL must be a PostgreSQL or SQLite URL")
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")
