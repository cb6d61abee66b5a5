"""Common module for shared error handling.

This module provides the foundational error types used throughout the application.
Every domain error derives from AppError and carries an ErrorCode, a human-readable
message and an HTTP status, which the global exception handlers turn into a uniform
``{"code": ..., "message": ...}`` JSON body.
"""

from .app_error import AppError
from .exceptions import (
    EmptyFileError,
    FileTooLargeError,
    InternalServerError,
    InvalidFileError,
    NotFoundError,
    UnsupportedFormatError,
)

__all__ = [
    "AppError",
    "EmptyFileError",
    "FileTooLargeError",
    "InternalServerError",
    "InvalidFileError",
    "NotFoundError",
    "UnsupportedFormatError",
]
