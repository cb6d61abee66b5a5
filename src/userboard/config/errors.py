"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Auth errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"

    # User errors
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"

    # Upload errors
    INVALID_FILE = "INVALID_FILE"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    EMPTY_FILE = "EMPTY_FILE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal server error"

    # Auth errors
    LOGIN_DETAILS_INVALID = "Login details are not valid"
    ACCESS_NOT_ALLOWED = "You are not allowed to access"

    # File validation errors
    FILE_MISSING_ERROR = "No file provided"
    FILENAME_MISSING_ERROR = "File has no filename"
    FILENAME_TOO_LONG_ERROR = "Filename is too long"
