"""Security headers added to every response."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Final

from fastapi import FastAPI, Request, Response

from .config import settings

__all__ = ["add_security_headers"]


_DOCS_PREFIXES: Final = ("/docs", "/redoc", "/openapi.json")

_COMMON_HEADERS: Final[Mapping[str, str]] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "same-origin",
    "Permissions-Policy": (
        "accelerometer=(), camera=(), geolocation=(), gyroscope=(), "
        "magnetometer=(), microphone=(), payment=(), usb=(), interest-cohort=()"
    ),
}

# Avatars are served from the same origin under /uploads
_STRICT_CSP: Final = (
    "default-src 'self'; img-src 'self' data:; "
    "style-src 'self' 'unsafe-inline'; frame-ancestors 'none'"
)
_RELAXED_CSP: Final = "default-src * 'unsafe-inline' 'unsafe-eval'; img-src * data:"


def add_security_headers(app: FastAPI) -> None:
    """Register a middleware hardening all HTTP responses.

    Production responses get a same-origin Content-Security-Policy. The API
    docs and every non-production environment get a relaxed policy so Swagger
    UI can load its assets.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """
    strict = settings.app_env == "production"

    @app.middleware("http")
    async def _security_headers_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        response = await call_next(request)
        response.headers.update(_COMMON_HEADERS)
        response.headers["Content-Security-Policy"] = _content_security_policy(
            request.url.path, strict=strict
        )
        return response


def _content_security_policy(path: str, *, strict: bool) -> str:
    if strict and not path.startswith(_DOCS_PREFIXES):
        return _STRICT_CSP
    return _RELAXED_CSP
