"""Common test fixtures for the application."""

import os
import shutil
from pathlib import Path

os.environ.setdefault("ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test_app.db")
os.environ.setdefault("CLEAR_DB_ON_RESTART", "true")
os.environ.setdefault("SEED_DB_ON_START", "true")
os.environ.setdefault("USER_PAGE_SIZE", "3")

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from userboard.app import app
from userboard.config import settings
from userboard.config.seed import SEED_PASSWORD

_TEST_DB = Path("test_app.db")


@pytest.fixture(scope="session", autouse=True)
def cleanup_test_db() -> Generator[None]:
    """Remove the test database and uploads before and after the session."""
    for path in (_TEST_DB, settings.upload_dir):
        if path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
    yield
    if _TEST_DB.exists():
        _TEST_DB.unlink()
    shutil.rmtree(settings.upload_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def clean_upload_dir() -> None:
    """Start every test with an empty upload directory."""
    shutil.rmtree(settings.upload_dir, ignore_errors=True)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)


@pytest.fixture(name="client")
def client_fixture() -> Generator[TestClient]:
    """Create a test client running the app lifespan.

    The lifespan recreates the tables and seeds the example users, so every
    test starts from the same seven users.

    Returns:
        TestClient: Configured FastAPI test client.
    """
    with TestClient(app, base_url="http://testserver") as client:  # NOSONAR
        yield client


@pytest.fixture(name="signed_in_client")
def signed_in_client_fixture(client: TestClient) -> TestClient:
    """Test client with a session for the first seeded user."""
    response = client.post(
        "/auth/login", json={"email": "ada@example.com", "password": SEED_PASSWORD}
    )
    assert response.status_code == 200  # noqa: S101, PLR2004
    return client
