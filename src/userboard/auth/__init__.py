"""Auth module.

Session-based sign-in on top of Starlette's signed cookie sessions. Passwords
are hashed with passlib; the session only stores the user ID, which
``get_current_user`` resolves through the user repository on every request.
"""

from .dependency import get_current_user, get_optional_user
from .exceptions import InvalidCredentialsError, NotAuthenticatedError

__all__ = [
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "get_current_user",
    "get_optional_user",
]
