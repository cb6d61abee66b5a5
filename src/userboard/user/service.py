"""User service."""

from collections.abc import Callable

from fastapi import UploadFile
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.config import settings
from userboard.pagination import build_navigation, compute_window
from userboard.utils.password import hash_password
from userboard.utils.prometheus import OUT_OF_RANGE_PAGES

from .exceptions import EmailAlreadyExistsError, PasswordTooShortError
from .models import User, UserAll, UserPublic
from .repository import (
    count_users_db,
    find_user_by_email_db,
    get_user_db,
    get_users_slice_db,
    save_user_db,
)
from .schemas import UserCreate, UserPage
from .utils.avatar_fs import delete_avatar, save_avatar

__all__ = ["get_user_svc", "get_users_page_svc", "register_user_svc"]


async def get_users_page_svc(
    db: AsyncSession,
    requested_page: int | str | None,
    url_for_page: Callable[[int], str],
) -> UserPage:
    """Read one page of the user listing.

    Counts the users, computes the page window from the count and fetches the
    slice at the window's offset. Count and slice are two separate reads.

    Args:
        db: Database session for persistence operations
        requested_page: Raw page number; ``None`` selects the first page
        url_for_page: Builds the listing URL of a page for the navigation

    Returns:
        UserPage: The users of the page together with the window values.
    """
    total = await count_users_db(db)
    window = compute_window(requested_page, settings.user_page_size, total)
    if window.current_page > max(window.total_pages, 1):
        OUT_OF_RANGE_PAGES.inc()
        logger.debug(
            "Page beyond last page requested",
            page=window.current_page,
            totalpages=window.total_pages,
        )
    # Pages past the end select nothing; their offset may exceed a 64-bit integer
    rows = (
        await get_users_slice_db(db, offset=window.offset, limit=window.limit)
        if window.current_page <= window.total_pages
        else []
    )

    return UserPage.from_window(
        window=window,
        items=[UserAll.model_validate(row) for row in rows],
        navigation=build_navigation(window, url_for_page),
    )


async def get_user_svc(db: AsyncSession, user_id: int) -> UserPublic:
    """Read a single user from the database.

    Args:
        db: Database session for persistence operations
        user_id: The ID of the user to retrieve

    Returns:
        UserPublic: The user without the password hash.
    """
    user = await get_user_db(db, user_id)
    return UserPublic.model_validate(user)


async def register_user_svc(
    db: AsyncSession, data: UserCreate, file: UploadFile
) -> int:
    """Register a new user with an avatar image.

    The avatar is written before the user row; if the row cannot be stored
    the file is removed again.

    Args:
        db: Database session for persistence operations
        data: Validated registration fields
        file: The uploaded avatar image

    Returns:
        int: ID of the created user.

    Raises:
        PasswordTooShortError: If the password is shorter than configured.
        EmailAlreadyExistsError: If the e-mail address is already registered.
        InvalidFileError: If the avatar filename is missing or too long.
        UnsupportedFormatError: If the avatar is not an allowed image type.
        EmptyFileError: If the avatar file is empty.
        FileTooLargeError: If the avatar exceeds the maximum upload size.
    """
    if len(data.password) < settings.min_password_length:
        raise PasswordTooShortError(settings.min_password_length)

    email = data.email.strip().lower()
    if await find_user_by_email_db(db, email) is not None:
        raise EmailAlreadyExistsError(email)

    image = await save_avatar(file)
    user = User(
        name=data.name,
        email=email,
        phone=data.phone,
        image=image,
        password=hash_password(data.password),
    )

    try:
        user = await save_user_db(db, user)
    except IntegrityError as e:
        await db.rollback()
        await delete_avatar(image)
        raise EmailAlreadyExistsError(email) from e
    except Exception:
        await delete_avatar(image)
        raise

    logger.debug("User registered", user_id=user.id, image=image)
    return user.id  # type: ignore[return-value]
