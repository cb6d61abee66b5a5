"""Configuration module for the Userboard application.

This module provides centralized configuration management for the entire application,
including database connections, logging setup, error handling, and application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Database: SQLAlchemy async engine and session management
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and messages
- Database seeding: Example users for development and testing

Settings are validated when the module is imported, so a misconfigured page size
or upload limit stops the service at start-up instead of failing per request.
"""

from userboard.config.config import settings
from userboard.config.db import engine, get_session
from userboard.config.errors import ErrorCode, ErrorNames
from userboard.config.logger import config_logger
from userboard.config.seed import seed_db

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "config_logger",
    "engine",
    "get_session",
    "seed_db",
    "settings",
]
