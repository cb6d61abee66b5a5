"""User exceptions."""

from fastapi import status

from userboard.common.app_error import AppError
from userboard.common.exceptions import NotFoundError
from userboard.config.errors import ErrorCode

__all__ = ["EmailAlreadyExistsError", "PasswordTooShortError", "UserNotFoundError"]


class UserNotFoundError(NotFoundError):
    """Exception raised when the user is not found."""

    def __init__(self, user_id: int) -> None:
        """Initialize with the user ID."""
        super().__init__(f"User with ID {user_id} not found", user_id=user_id)


class EmailAlreadyExistsError(AppError):
    """Exception raised when the e-mail address is already registered."""

    error_code = ErrorCode.EMAIL_ALREADY_EXISTS
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, email: str) -> None:
        """Initialize with the e-mail address."""
        super().__init__(f"User with e-mail {email} already exists", email=email)


class PasswordTooShortError(AppError):
    """Exception raised when a registration password is too short."""

    error_code = ErrorCode.PASSWORD_TOO_SHORT
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, min_length: int) -> None:
        """Initialize with the required minimum length."""
        super().__init__(f"Password must be at least {min_length} characters long")
