"""Session-backed current user lookup."""

from typing import Annotated, Final

from fastapi import Depends, Request
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.config.db import get_session
from userboard.user.exceptions import UserNotFoundError
from userboard.user.models import User
from userboard.user.repository import get_user_db

from .exceptions import NotAuthenticatedError

__all__ = ["SESSION_USER_KEY", "get_current_user", "get_optional_user"]


SESSION_USER_KEY: Final = "user_id"


async def get_optional_user(
    request: Request, db: Annotated[AsyncSession, Depends(get_session)]
) -> User | None:
    """Return the signed-in user, or None for anonymous requests.

    A session pointing at a user that no longer exists is cleared.
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    try:
        return await get_user_db(db, int(user_id))
    except (UserNotFoundError, TypeError, ValueError):
        logger.debug("Stale session cleared", user_id=user_id)
        request.session.clear()
        return None


async def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Return the signed-in user.

    Raises:
        NotAuthenticatedError: If the request carries no valid session.
    """
    if user is None:
        raise NotAuthenticatedError
    return user
