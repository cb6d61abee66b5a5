# ruff: noqa: S101

"""Tests for the user detail view."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient


@pytest.mark.user
class TestGetUser:
    """Tests for GET /users/{user_id}."""

    def test_get_user_by_id(self, client: TestClient) -> None:
        """A seeded user is returned with all public fields."""
        response = client.get("/users/1")
        assert response.status_code == status.HTTP_200_OK

        user = response.json()
        assert user["id"] == 1
        assert user["name"] == "Ada Lovelace"
        assert user["email"] == "ada@example.com"
        assert user["image"] == "default.png"
        assert "phone" in user
        assert "created_at" in user
        assert "updated_at" in user
        assert "password" not in user

    def test_get_user_non_existent_id(self, client: TestClient) -> None:
        """An unknown ID answers 404."""
        response = client.get("/users/4242")
        assert response.status_code == status.HTTP_404_NOT_FOUND

        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["message"] == "User with ID 4242 not found"

    def test_get_user_id_beyond_integer_range(self, client: TestClient) -> None:
        """IDs too large for the database are reported as missing."""
        response = client.get("/users/99999999999999999999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"

    def test_get_user_invalid_id(self, client: TestClient) -> None:
        """A non-numeric ID fails request validation."""
        response = client.get("/users/not-a-number")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
