"""User repository."""

from collections.abc import Sequence
from typing import Final

from loguru import logger
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from .exceptions import UserNotFoundError
from .models import User


__all__ = [
    "MAX_ROW_ID",
    "count_users_db",
    "find_user_by_email_db",
    "get_user_db",
    "get_users_slice_db",
    "save_user_db",
]


# Largest value a signed 64-bit INTEGER column holds
MAX_ROW_ID: Final = 2**63 - 1


async def count_users_db(db: AsyncSession) -> int:
    """Count all users.

    The count is read fresh on every call and is a separate statement from
    the slice fetch, so rows inserted in between are not reflected in both.

    Args:
        db: Database session instance.

    Returns:
        int: Number of users in the database.
    """
    total = await db.scalar(select(func.count()).select_from(User))
    return total or 0


async def get_users_slice_db(
    db: AsyncSession, *, offset: int, limit: int
) -> Sequence[User]:
    """Fetch a contiguous slice of users ordered by ID.

    Args:
        db: Database session instance.
        offset: Number of users to skip.
        limit: Maximum number of users to return.

    Returns:
        The users of the slice; empty when the offset is past the end.
    """
    stmt = select(User).order_by(col(User.id)).offset(offset).limit(limit)
    users = (await db.exec(stmt)).all()

    logger.debug("Users retrieved", offset=offset, limit=limit, items=len(users))
    return users


async def get_user_db(db: AsyncSession, user_id: int) -> User:
    """Retrieve a user by ID.

    Args:
        db: Database session instance.
        user_id: The ID of the user to retrieve.

    Returns:
        User: The user with the given ID.

    Raises:
        UserNotFoundError: If the user is not found.
    """
    user = await db.get(User, user_id) if user_id <= MAX_ROW_ID else None
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def find_user_by_email_db(db: AsyncSession, email: str) -> User | None:
    """Look up a user by e-mail address."""
    result = await db.exec(select(User).where(User.email == email))
    return result.first()


async def save_user_db(db: AsyncSession, user: User) -> User:
    """Persist a new user.

    Args:
        db: Database session instance.
        user: The user to save.

    Returns:
        User: The saved user with its generated ID and timestamps.
    """
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.debug("User saved to DB", user_id=user.id, email=user.email)
    return user
