"""User schemas."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from userboard.pagination import PageNavigation, PageWindow

from .models import UserAll

__all__ = ["UserCreate", "UserPage"]


class UserPage(BaseModel):
    """One page of the user listing with its navigation."""

    page: int = Field(description="Current page, starts at 1")
    size: int = Field(description="Users per page")
    offset: int = Field(description="Users skipped before this page")
    total: int = Field(description="Users in the store when the page was built")
    totalpages: int = Field(description="Number of pages")
    page_indices: list[int]
    has_previous: bool
    has_next: bool
    navigation: PageNavigation
    items: Sequence[UserAll]

    @classmethod
    def from_window(
        cls,
        *,
        window: PageWindow,
        items: Sequence[UserAll],
        navigation: PageNavigation,
    ) -> "UserPage":
        """Factory method to create a UserPage from a computed window."""
        return cls(
            page=window.current_page,
            size=window.limit,
            offset=window.offset,
            total=window.total_records,
            totalpages=window.total_pages,
            page_indices=window.page_indices,
            has_previous=window.has_previous,
            has_next=window.has_next,
            navigation=navigation,
            items=items,
        )


class UserCreate(BaseModel):
    """Registration form fields besides the avatar file."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    phone: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=1)
