"""Common exceptions."""

from fastapi import status

from userboard.common.app_error import AppError
from userboard.config.errors import ErrorCode, ErrorNames

__all__ = [
    "EmptyFileError",
    "FileTooLargeError",
    "InternalServerError",
    "InvalidFileError",
    "NotFoundError",
    "UnsupportedFormatError",
]


class NotFoundError(AppError):
    """Exception raised when something is not found."""

    error_code = ErrorCode.NOT_FOUND
    message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND


class InternalServerError(AppError):
    """Exception raised for internal server errors."""

    error_code = ErrorCode.SERVER_ERROR
    message = ErrorNames.INTERNAL_SERVER_ERROR
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidFileError(AppError):
    """Exception raised when the file is invalid."""

    error_code = ErrorCode.INVALID_FILE
    message = "Invalid file"
    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedFormatError(AppError):
    """Exception raised when the file extension is not allowed."""

    error_code = ErrorCode.UNSUPPORTED_FORMAT
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE

    def __init__(self, file_format: str) -> None:
        """Initialize with the rejected extension."""
        super().__init__(
            f"File format '{file_format}' is not supported", file_format=file_format
        )


class EmptyFileError(AppError):
    """Exception raised when an uploaded file has no content."""

    error_code = ErrorCode.EMPTY_FILE
    message = "File is empty"
    status_code = status.HTTP_400_BAD_REQUEST


class FileTooLargeError(AppError):
    """Exception raised when an upload exceeds the configured size."""

    error_code = ErrorCode.FILE_TOO_LARGE
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

    def __init__(self, max_size: int) -> None:
        """Initialize with the size limit in bytes."""
        super().__init__(
            f"File exceeds the maximum size of {max_size} bytes", max_size=max_size
        )
