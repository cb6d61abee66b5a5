# ruff: noqa: S101

"""Tests for the user repository and listing service against a bare database."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.user.exceptions import UserNotFoundError
from userboard.user.models import User
from userboard.user.repository import (
    MAX_ROW_ID,
    count_users_db,
    find_user_by_email_db,
    get_user_db,
    get_users_slice_db,
    save_user_db,
)
from userboard.user.service import get_users_page_svc


def _url_for_page(page: int) -> str:
    return f"/users/page/{page}"


def _user(index: int) -> User:
    return User(
        name=f"User {index}",
        email=f"user{index}@example.com",
        phone=f"+1 555 010{index}",
        image="default.png",
        password="not-a-real-hash",  # noqa: S106
    )


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> AsyncGenerator[AsyncSession]:
    """Session on an empty SQLite database of its own."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'repository.db'}", poolclass=NullPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session

    await engine.dispose()


@pytest.mark.user
class TestUserRepository:
    """Repository reads and writes."""

    @pytest.mark.asyncio
    async def test_count_empty(self, db: AsyncSession) -> None:
        """An empty table counts zero."""
        assert await count_users_db(db) == 0

    @pytest.mark.asyncio
    async def test_slice_in_id_order(self, db: AsyncSession) -> None:
        """Slices follow the ID order."""
        for index in range(1, 6):
            await save_user_db(db, _user(index))

        assert await count_users_db(db) == 5

        users = await get_users_slice_db(db, offset=2, limit=2)
        assert [user.email for user in users] == [
            "user3@example.com",
            "user4@example.com",
        ]

    @pytest.mark.asyncio
    async def test_slice_past_end(self, db: AsyncSession) -> None:
        """An offset past the last row gives an empty slice."""
        await save_user_db(db, _user(1))

        assert list(await get_users_slice_db(db, offset=3, limit=3)) == []

    @pytest.mark.asyncio
    async def test_get_missing_user(self, db: AsyncSession) -> None:
        """Reading an unknown ID raises UserNotFoundError."""
        with pytest.raises(UserNotFoundError):
            await get_user_db(db, 1)

    @pytest.mark.asyncio
    async def test_get_user_id_beyond_integer_range(self, db: AsyncSession) -> None:
        """IDs above the 64-bit range are missing rather than a store error."""
        with pytest.raises(UserNotFoundError):
            await get_user_db(db, MAX_ROW_ID + 1)

    @pytest.mark.asyncio
    async def test_find_by_email(self, db: AsyncSession) -> None:
        """E-mail lookups match the stored address."""
        saved = await save_user_db(db, _user(1))

        found = await find_user_by_email_db(db, "user1@example.com")
        assert found is not None
        assert found.id == saved.id
        assert await find_user_by_email_db(db, "nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_timestamps_are_set(self, db: AsyncSession) -> None:
        """The database fills in the creation timestamp."""
        saved = await save_user_db(db, _user(1))

        assert saved.id is not None
        assert saved.created_at is not None


@pytest.mark.user
@pytest.mark.pagination
class TestUsersPageService:
    """The listing service on small tables."""

    @pytest.mark.asyncio
    async def test_empty_table(self, db: AsyncSession) -> None:
        """No users means no pages and no navigation."""
        page = await get_users_page_svc(db, None, _url_for_page)

        assert page.page == 1
        assert page.offset == 0
        assert page.total == 0
        assert page.totalpages == 0
        assert page.items == []
        assert page.page_indices == []
        assert page.has_previous is False
        assert page.has_next is False
        assert page.navigation.previous is None
        assert page.navigation.next is None

    @pytest.mark.asyncio
    async def test_single_full_page(self, db: AsyncSession) -> None:
        """Exactly one page of users shows no page links."""
        for index in range(1, 4):
            await save_user_db(db, _user(index))

        page = await get_users_page_svc(db, "1", _url_for_page)

        assert page.totalpages == 1
        assert len(page.items) == 3
        assert page.has_next is False
        assert page.has_previous is False
        assert page.navigation.pages == []

    @pytest.mark.asyncio
    async def test_page_beyond_end(self, db: AsyncSession) -> None:
        """Pages past the end keep their number but list nobody."""
        for index in range(1, 5):
            await save_user_db(db, _user(index))

        page = await get_users_page_svc(db, 9, _url_for_page)

        assert page.page == 9
        assert page.offset == 24
        assert page.totalpages == 2
        assert page.items == []
        assert page.has_previous is True
        assert page.has_next is False
