"""User module.

Registration with an avatar upload, the paged user listing and the user
detail view. The repository doubles as the record store of the listing:
``count_users_db`` supplies the total, ``get_users_slice_db`` the rows at the
offset and limit of the computed page window.
"""

from .exceptions import EmailAlreadyExistsError, PasswordTooShortError, UserNotFoundError
from .models import User, UserAll, UserPublic
from .repository import (
    count_users_db,
    find_user_by_email_db,
    get_user_db,
    get_users_slice_db,
    save_user_db,
)

__all__ = [
    "EmailAlreadyExistsError",
    "PasswordTooShortError",
    "User",
    "UserAll",
    "UserNotFoundError",
    "UserPublic",
    "count_users_db",
    "find_user_by_email_db",
    "get_user_db",
    "get_users_slice_db",
    "save_user_db",
]
