"""Password hashing."""

from typing import Final

from passlib.context import CryptContext

__all__ = ["hash_password", "verify_password"]


_pwd_context: Final = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted hash for *password*."""
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check *password* against a stored hash; malformed hashes never match."""
    try:
        return _pwd_context.verify(password, password_hash)
    except ValueError:
        return False
