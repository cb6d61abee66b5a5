"""Auth exceptions."""

from fastapi import status

from userboard.common.app_error import AppError
from userboard.config.errors import ErrorCode, ErrorNames

__all__ = ["InvalidCredentialsError", "NotAuthenticatedError"]


class InvalidCredentialsError(AppError):
    """Exception raised when e-mail and password do not match a user."""

    error_code = ErrorCode.INVALID_CREDENTIALS
    message = ErrorNames.LOGIN_DETAILS_INVALID
    status_code = status.HTTP_401_UNAUTHORIZED


class NotAuthenticatedError(AppError):
    """Exception raised when a signed-in user is required."""

    error_code = ErrorCode.NOT_AUTHENTICATED
    message = ErrorNames.ACCESS_NOT_ALLOWED
    status_code = status.HTTP_401_UNAUTHORIZED
