"""Base class of all errors answered with a JSON error body."""

from typing import Any

from fastapi import status

from userboard.config.errors import ErrorCode

__all__ = ["AppError"]


class AppError(Exception):
    """Error mapped to an HTTP status and an ``ErrorCode``.

    Subclasses set ``error_code``, ``status_code`` and a default ``message``.
    Keyword arguments are kept as ``context`` and end up in the log record,
    never in the response body.
    """

    error_code: ErrorCode = ErrorCode.SERVER_ERROR
    message: str = "An unexpected error occurred"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None, **context: Any) -> None:  # noqa: ANN401
        """Initialize with optional custom message and log context."""
        if message:
            self.message = message
        self.context = context
        super().__init__(self.message)

    def to_content(self) -> dict[str, str]:
        """Body of the error response."""
        return {"code": self.error_code, "message": self.message}
