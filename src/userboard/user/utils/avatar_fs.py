"""Store avatar uploads on disk."""

from pathlib import Path
from typing import Final
from uuid import uuid4

import aiofiles
from aiofiles.os import makedirs, remove
from aiofiles.ospath import exists
from fastapi import UploadFile
from loguru import logger

from userboard.common.exceptions import EmptyFileError, FileTooLargeError
from userboard.config import settings
from userboard.utils.file_sanitizer import sanitize_filename

__all__ = ["delete_avatar", "save_avatar"]


_CHUNK_SIZE: Final = 65_536


async def save_avatar(file: UploadFile) -> str:
    """Stream an uploaded avatar into the upload directory.

    The stored name is the sanitised client filename prefixed with a short
    random token, so two users uploading ``me.png`` do not overwrite each
    other.

    Args:
        file: The uploaded image.

    Returns:
        str: Filename of the stored avatar, relative to the upload directory.

    Raises:
        InvalidFileError: If the filename is missing or too long.
        UnsupportedFormatError: If the extension is not an allowed image type.
        EmptyFileError: If the upload has no content.
        FileTooLargeError: If the upload exceeds ``avatar_max_upload_size``.
    """
    safe = sanitize_filename(file, settings.allowed_image_extensions)
    stored_name = f"{uuid4().hex[:8]}_{safe.filename}"

    await makedirs(settings.upload_dir, exist_ok=True)
    target = Path(settings.upload_dir) / stored_name

    written = 0
    try:
        async with aiofiles.open(target, "wb") as out:
            while chunk := await file.read(_CHUNK_SIZE):
                written += len(chunk)
                if written > settings.avatar_max_upload_size:
                    raise FileTooLargeError(settings.avatar_max_upload_size)
                await out.write(chunk)
        if written == 0:
            raise EmptyFileError
    except Exception:
        await delete_avatar(stored_name)
        raise

    logger.debug("Avatar stored", filename=stored_name, size=written)
    return stored_name


async def delete_avatar(filename: str) -> bool:
    """Delete a stored avatar.

    Args:
        filename: Name returned by ``save_avatar``.

    Returns:
        True if the file was deleted, False if it did not exist.
    """
    path = Path(settings.upload_dir) / filename
    if not await exists(path):
        return False
    await remove(path)
    return True
