"""Offset-based page window calculation."""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, computed_field

__all__ = ["PageWindow", "coerce_page", "compute_window"]


DEFAULT_PAGE: Final = 1


class PageWindow(BaseModel):
    """Values needed to fetch and render one page of an offset/limit listing.

    The current page is never checked against ``total_pages``: a page past the
    end keeps its offset and simply selects no rows from the store.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(ge=1, description="Normalised 1-based page number")
    offset: int = Field(ge=0, description="Number of records to skip")
    limit: int = Field(gt=0, description="Number of records to fetch")
    total_records: int = Field(ge=0, description="Record count used for the window")
    total_pages: int = Field(ge=0, description="ceil(total_records / limit)")

    @computed_field
    @property
    def has_previous(self) -> bool:
        """Whether a page precedes the current one."""
        return self.current_page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        """Whether a next-page control is shown.

        A single-page listing never offers one, whatever the current page is.
        """
        return self.total_pages != 1 and self.current_page < self.total_pages

    @computed_field
    @property
    def page_indices(self) -> list[int]:
        """All page numbers in display order, empty without records."""
        return list(range(1, self.total_pages + 1))

    @computed_field
    @property
    def show_page_links(self) -> bool:
        """Numbered page links are left out when there is exactly one page."""
        return self.total_pages != 1


def coerce_page(requested_page: int | str | None) -> int:
    """Turn a raw page value into a page number of at least 1.

    Absent, boolean and non-numeric values fall back to the first page.
    Numeric strings are parsed as base-10 integers after stripping
    whitespace; zero and negative numbers are clamped to 1. There is no
    upper bound.
    """
    if requested_page is None or isinstance(requested_page, bool):
        return DEFAULT_PAGE

    if isinstance(requested_page, int):
        page = requested_page
    else:
        try:
            page = int(str(requested_page).strip(), 10)
        except ValueError:
            return DEFAULT_PAGE

    return max(DEFAULT_PAGE, page)


def compute_window(
    requested_page: int | str | None, page_size: int, total_records: int
) -> PageWindow:
    """Compute the page window for a listing.

    Args:
        requested_page: Raw page number, e.g. a URL path segment. ``None``
            selects the first page.
        page_size: Fixed number of records per page. Must be positive; this
            is guaranteed by the settings, not checked here.
        total_records: Current record count reported by the store.

    Returns:
        PageWindow: The normalised page, its offset/limit and the page list.
    """
    current_page = coerce_page(requested_page)
    return PageWindow(
        current_page=current_page,
        offset=(current_page - 1) * page_size,
        limit=page_size,
        total_records=total_records,
        total_pages=(total_records + page_size - 1) // page_size,
    )
