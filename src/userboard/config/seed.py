"""Seed the database with initial data."""

from typing import Final

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.config.config import settings
from userboard.user.models import User
from userboard.utils.password import hash_password

__all__ = ["SEED_PASSWORD", "SEED_USER_COUNT", "seed_db"]


SEED_PASSWORD: Final = "secret123"  # noqa: S105

_SEED_USERS: Final = [
    ("Ada Lovelace", "ada@example.com", "+44 20 7946 0001"),
    ("Alan Turing", "alan@example.com", "+44 20 7946 0002"),
    ("Grace Hopper", "grace@example.com", "+1 202 555 0103"),
    ("Edsger Dijkstra", "edsger@example.com", "+31 20 555 0104"),
    ("Barbara Liskov", "barbara@example.com", "+1 617 555 0105"),
    ("Donald Knuth", "donald@example.com", "+1 650 555 0106"),
    ("Margaret Hamilton", "margaret@example.com", "+1 617 555 0107"),
]

SEED_USER_COUNT: Final = len(_SEED_USERS)


async def seed_db(session: AsyncSession) -> None:
    """Seed the database with example users.

    Every seeded user signs in with ``SEED_PASSWORD`` and points at a
    placeholder avatar. Nothing is added when users already exist and the
    database is kept across restarts.

    Args:
        session: The SQLModel async database session.
    """
    if not settings.clear_db_on_restart:
        result = await session.exec(select(User).limit(1))
        if result.first() is not None:
            return

    password_hash = hash_password(SEED_PASSWORD)
    session.add_all(
        User(
            name=name,
            email=email,
            phone=phone,
            image="default.png",
            password=password_hash,
        )
        for name, email, phone in _SEED_USERS
    )
    await session.commit()
    logger.info("Database seeded with initial data", users=SEED_USER_COUNT)
