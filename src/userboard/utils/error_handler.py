"""Global exception handlers for Application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from userboard.common.app_error import AppError
from userboard.common.exceptions import InternalServerError

from .error_path import get_error_path

__all__ = ["register_exception_handlers"]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Registers handlers for:
    - Application errors (AppError)
    - Unexpected exceptions, including record store failures (500)

    Request validation errors keep FastAPI's default 422 response.

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        logger.debug(
            "{}: {}",
            exc.error_code,
            exc.message,
            path=get_error_path(exc),
            **exc.context,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(Exception)
    def _handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Handle any uncaught exceptions as 500 server errors."""
        logger.opt(exception=exc).error("{}", str(exc), path=get_error_path(exc))
        error = InternalServerError()
        return JSONResponse(status_code=error.status_code, content=error.to_content())
