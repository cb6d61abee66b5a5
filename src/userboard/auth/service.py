"""Auth service."""

from fastapi import Request
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.user.models import User
from userboard.user.repository import find_user_by_email_db
from userboard.utils.password import verify_password

from .dependency import SESSION_USER_KEY
from .exceptions import InvalidCredentialsError

__all__ = ["login_svc", "logout_svc"]


async def login_svc(
    db: AsyncSession, request: Request, email: str, password: str
) -> User:
    """Verify credentials and bind the user to the session.

    Args:
        db: Database session for persistence operations
        request: The HTTP request carrying the session
        email: Submitted e-mail address
        password: Submitted plain password

    Returns:
        User: The signed-in user.

    Raises:
        InvalidCredentialsError: If no user matches the credentials.
    """
    user = await find_user_by_email_db(db, email.strip().lower())
    if user is None or not verify_password(password, user.password):
        logger.debug("Login rejected", email=email)
        raise InvalidCredentialsError

    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id
    logger.debug("User signed in", user_id=user.id)
    return user


def logout_svc(request: Request) -> None:
    """Flush the session."""
    user_id = request.session.get(SESSION_USER_KEY)
    request.session.clear()
    logger.debug("User signed out", user_id=user_id)
