"""Define configuration for the project."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _config = tomllib.load(f)
    _app_config = _config.get("app", {})
    _server_config = _app_config.get("server", {})
    _user_config = _app_config.get("user", {})
    _upload_config = _app_config.get("upload", {})
    _session_config = _app_config.get("session", {})
    _db_config = _app_config.get("db", {})
    _log_config = _app_config.get("logging", {})


class Settings(BaseSettings):
    """Application configuration settings."""

    # Environment configuration
    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining behavior.",
        validation_alias="ENV",
    )

    # Server configuration
    host_binding: str = Field(
        default=_server_config.get("host_binding", "127.0.0.1"),
        description="Host address the server binds to.",
    )

    port: int = Field(
        default=_server_config.get("port", 8000),
        description="Network port the server listens on.",
    )

    version: str = Field(
        default=_server_config.get("version", "0.1.0"),
        description="Version of the application.",
    )

    root_path: str = Field(
        default=_server_config.get("root_path", ""),
        description="Path prefix when served behind a proxy.",
    )

    allow_origin_in_dev: list[str] = Field(
        default=_server_config.get("allow_origin_in_dev", ["http://localhost:3000"]),
        description="CORS allowed origins outside of production.",
    )

    # User configuration
    user_page_size: int = Field(
        default=_user_config.get("page_size", 3),
        gt=0,
        description="Number of users shown on one page of the listing.",
        validation_alias="USER_PAGE_SIZE",
    )

    min_password_length: int = Field(
        default=_user_config.get("min_password_length", 6),
        ge=1,
        description="Minimum accepted password length on registration.",
    )

    # Upload configuration
    upload_dir_config: Path = Field(
        default=Path(_upload_config.get("upload_dir", "data/uploads")),
        description="Base directory for storing uploaded avatar images.",
        exclude=True,
    )

    allowed_image_extensions: frozenset[str] = Field(
        default=frozenset(_upload_config.get("allowed_image_extensions", [])),
        description="File extensions permitted for avatar uploads.",
    )

    max_filename_length: int = Field(
        default=_upload_config.get("max_filename_length", 128),
        description="Maximum allowed length for uploaded filenames.",
    )

    avatar_max_upload_size: int = Field(
        default=_upload_config.get("max_upload_size", 5_242_880),
        gt=0,
        description="Maximum allowed size for avatar uploads in bytes.",
    )

    # Session configuration
    session_secret_key: str = Field(
        default="change-me-in-production",
        description="Secret used to sign the session cookie.",
        validation_alias="SESSION_SECRET_KEY",
    )

    session_cookie: str = Field(
        default=_session_config.get("cookie", "userboard_session"),
        description="Name of the session cookie.",
    )

    session_max_age: int = Field(
        default=_session_config.get("max_age", 1_209_600),
        description="Lifetime of the session cookie in seconds.",
    )

    # Database configuration
    db_url: str = Field(
        default="sqlite+aiosqlite:///app.db",
        description="Database connection URL.",
        validation_alias="DATABASE_URL",
    )

    db_logging: bool = Field(
        default=_db_config.get("logging", False),
        description="Whether to enable SQL query logging.",
    )

    db_future: bool = Field(
        default=_db_config.get("future", True),
        description="Whether to use future SQLAlchemy features.",
    )

    db_timeout: int = Field(
        default=_db_config.get("timeout", 30),
        description="Timeout for database operations in seconds.",
    )

    db_pool_size: int = Field(
        default=_db_config.get("pool_size", 5),
        description="Size of the database connection pool.",
    )

    db_max_overflow: int = Field(
        default=_db_config.get("max_overflow", 10),
        description="Maximum number of connections to create beyond the pool size.",
    )

    db_pool_timeout: int = Field(
        default=_db_config.get("pool_timeout", 30),
        description="Timeout for acquiring a connection from the pool.",
    )

    db_pool_recycle: int = Field(
        default=_db_config.get("pool_recycle", 300),
        description="Time in seconds to recycle a connection.",
    )

    db_pool_pre_ping: bool = Field(
        default=_db_config.get("pool_pre_ping", True),
        description="Whether to check if a connection is alive before using it.",
    )

    clear_db_on_restart: bool = Field(
        default=True,
        validation_alias="CLEAR_DB_ON_RESTART",
        description="Whether to clear the database on application restart.",
    )

    seed_db_on_start: bool = Field(
        default=True,
        validation_alias="SEED_DB_ON_START",
        description="Whether to seed the database with example users on start.",
    )

    # Log configuration
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory for storing log files.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "10 MB"),
        description="Log rotation strategy (time or size-based).",
    )

    @computed_field
    @property
    def upload_dir(self) -> Path:
        """Directory for storing uploaded avatar images."""
        if self.app_env == "testing":
            return Path("test_data/uploads")
        return self.upload_dir_config

    @computed_field
    @property
    def log_path(self) -> Path:
        """Path where application logs are stored."""
        return Path(self.log_dir) / self.log_file

    @computed_field
    @property
    def reload(self) -> bool:
        """Whether to enable auto-reload on code changes."""
        return bool(_server_config.get("reload")) and self.app_env == "development"

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Adjust log level based on environment."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Create a single instance of Settings to use throughout the application
settings = Settings()
