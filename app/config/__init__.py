"""Configuration package for the Omedeto API."""

from .api import ApiSettings, get_settings
from .base import BaseSettings
from .database import DatabaseConfig

__all__ = ["ApiSettings", "BaseSettings", "DatabaseConfig", "get_settings"]
