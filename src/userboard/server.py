"""ASGI server for the FastAPI application."""

from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from userboard.config import settings

__all__ = ["run"]


def _server_options() -> dict[str, Any]:
    """Uvicorn options for the current environment.

    Outside production uvicorn keeps its own coloured access log; in
    production every record goes through the loguru intercept instead.
    """
    options: dict[str, Any] = {
        "host": settings.host_binding,
        "port": settings.port,
        "server_header": False,
        "proxy_headers": True,
    }
    if settings.app_env == "production":
        options |= {"log_config": None, "log_level": None}
    else:
        options |= {"log_config": LOGGING_CONFIG, "log_level": "info"}
    if settings.reload:
        options |= {"reload": True, "reload_dirs": ["src/userboard"]}
    return options


def run() -> None:
    """Serve ``userboard:app`` with uvicorn."""
    uvicorn.run("userboard:app", **_server_options())
