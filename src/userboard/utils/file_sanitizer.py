"""Reduce client supplied filenames to something safe to store."""

import re
from collections.abc import Collection
from pathlib import PurePath
from typing import Final, NamedTuple

from fastapi import UploadFile

from userboard.common.exceptions import InvalidFileError, UnsupportedFormatError
from userboard.config import settings
from userboard.config.errors import ErrorNames

__all__ = ["SafeFilename", "sanitize_filename"]


_UNSAFE_RUN: Final = re.compile(r"[^A-Za-z0-9_-]+")


class SafeFilename(NamedTuple):
    """Sanitised filename and its lower-case extension."""

    filename: str
    extension: str


def sanitize_filename(
    file: UploadFile, allowed_extensions: Collection[str]
) -> SafeFilename:
    """Strip directories and unsafe characters from an upload's filename.

    Every run of characters outside ``[A-Za-z0-9_-]`` in the stem becomes a
    single underscore; the extension is lower-cased.

    Args:
        file: The uploaded file.
        allowed_extensions: Permitted lower-case extensions.

    Returns:
        SafeFilename: Name that can be written below the upload directory.

    Raises:
        InvalidFileError: If the name or its extension is missing, or the
            stem is longer than ``max_filename_length``.
        UnsupportedFormatError: If the extension is not allowed.
    """
    if not file.filename:
        raise InvalidFileError(ErrorNames.FILENAME_MISSING_ERROR)

    name = PurePath(file.filename.replace("\\", "/")).name
    stem, dot, ext = name.rpartition(".")
    if not stem or not dot or not ext:
        raise InvalidFileError(ErrorNames.FILENAME_MISSING_ERROR)

    ext = ext.lower()
    if ext not in allowed_extensions:
        raise UnsupportedFormatError(ext)

    safe_stem = _UNSAFE_RUN.sub("_", stem)
    if len(safe_stem) > settings.max_filename_length:
        raise InvalidFileError(ErrorNames.FILENAME_TOO_LONG_ERROR)

    return SafeFilename(f"{safe_stem}.{ext}", ext)
