# ruff: noqa: S101

"""Tests for the paged user listing."""

import math

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from tests.utils import get_avatar_file, registration_form
from userboard.config.seed import SEED_USER_COUNT

_PAGE_SIZE = 3
_LAST_PAGE = math.ceil(SEED_USER_COUNT / _PAGE_SIZE)


@pytest.mark.user
class TestUserList:
    """Tests for GET /users and GET /users/page/{page}."""

    def test_first_page_without_segment(self, client: TestClient) -> None:
        """Listing without a page segment shows page one."""
        response = client.get("/users")
        assert response.status_code == status.HTTP_200_OK

        payload = response.json()
        assert payload["page"] == 1
        assert payload["size"] == _PAGE_SIZE
        assert payload["offset"] == 0
        assert payload["total"] == SEED_USER_COUNT
        assert payload["totalpages"] == _LAST_PAGE
        assert payload["page_indices"] == [1, 2, 3]
        assert payload["has_previous"] is False
        assert payload["has_next"] is True
        assert [item["id"] for item in payload["items"]] == [1, 2, 3]

    def test_first_page_navigation(self, client: TestClient) -> None:
        """Navigation links point at the page routes."""
        navigation = client.get("/users").json()["navigation"]

        assert navigation["previous"] is None
        assert navigation["next"] == "/users/page/2"
        assert [link["url"] for link in navigation["pages"]] == [
            "/users/page/1",
            "/users/page/2",
            "/users/page/3",
        ]
        assert navigation["pages"][0]["current"] is True

    def test_middle_page(self, client: TestClient) -> None:
        """Second page skips the first three users."""
        payload = client.get("/users/page/2").json()

        assert payload["page"] == 2
        assert payload["offset"] == 3
        assert payload["has_previous"] is True
        assert payload["has_next"] is True
        assert [item["id"] for item in payload["items"]] == [4, 5, 6]
        assert payload["navigation"]["previous"] == "/users/page/1"
        assert payload["navigation"]["next"] == "/users/page/3"

    def test_last_page(self, client: TestClient) -> None:
        """Last page holds the remainder and has no next link."""
        payload = client.get(f"/users/page/{_LAST_PAGE}").json()

        expected_items = SEED_USER_COUNT % _PAGE_SIZE or _PAGE_SIZE
        assert payload["page"] == _LAST_PAGE
        assert len(payload["items"]) == expected_items
        assert payload["has_next"] is False
        assert payload["navigation"]["next"] is None

    def test_page_past_the_end(self, client: TestClient) -> None:
        """A page beyond the last one is accepted and empty."""
        response = client.get("/users/page/99")
        assert response.status_code == status.HTTP_200_OK

        payload = response.json()
        assert payload["page"] == 99
        assert payload["offset"] == 294
        assert payload["totalpages"] == _LAST_PAGE
        assert payload["items"] == []
        assert payload["has_next"] is False
        assert payload["navigation"]["previous"] == "/users/page/98"

    def test_page_beyond_integer_range(self, client: TestClient) -> None:
        """Page numbers whose offset overflows a 64-bit integer are still empty."""
        segment = "99999999999999999999"
        response = client.get(f"/users/page/{segment}")
        assert response.status_code == status.HTTP_200_OK

        payload = response.json()
        assert payload["page"] == int(segment)
        assert payload["totalpages"] == _LAST_PAGE
        assert payload["items"] == []
        assert payload["has_next"] is False

    @pytest.mark.parametrize("segment", ["0", "-3", "abc", "1.5"])
    def test_invalid_segment_falls_back_to_first_page(
        self, client: TestClient, segment: str
    ) -> None:
        """Zero, negative and non-numeric segments show page one."""
        response = client.get(f"/users/page/{segment}")
        assert response.status_code == status.HTTP_200_OK

        payload = response.json()
        assert payload["page"] == 1
        assert payload["offset"] == 0
        assert [item["id"] for item in payload["items"]] == [1, 2, 3]

    def test_items_hide_password(self, client: TestClient) -> None:
        """Listing rows never include the password hash."""
        items = client.get("/users").json()["items"]

        assert items
        for item in items:
            assert "password" not in item
            assert {"id", "name", "email", "phone", "image", "created_at"} <= set(item)

    def test_new_user_extends_page_count(self, client: TestClient) -> None:
        """The count is read per request, so new users show up immediately."""
        for email in ("extra1@example.com", "extra2@example.com"):
            response = client.post(
                "/users", data=registration_form(email=email), files=get_avatar_file()
            )
            assert response.status_code == status.HTTP_201_CREATED

        payload = client.get("/users").json()
        assert payload["total"] == 9
        assert payload["totalpages"] == 3

        client.post(
            "/users",
            data=registration_form(email="extra3@example.com"),
            files=get_avatar_file(),
        )
        payload = client.get("/users/page/4").json()
        assert payload["totalpages"] == 4
        assert [item["email"] for item in payload["items"]] == ["extra3@example.com"]
