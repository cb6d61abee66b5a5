"""Navigation controls rendered from a page window."""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from .window import PageWindow

__all__ = ["PageLink", "PageNavigation", "build_navigation"]


class PageLink(BaseModel):
    """A numbered link in the page navigation."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(ge=1)
    url: str
    current: bool = False


class PageNavigation(BaseModel):
    """Previous / numbered / next controls for a listing."""

    model_config = ConfigDict(frozen=True)

    previous: str | None = Field(default=None, description="URL of the prior page")
    pages: list[PageLink] = Field(default_factory=list)
    next: str | None = Field(default=None, description="URL of the following page")


def build_navigation(
    window: PageWindow, url_for_page: Callable[[int], str]
) -> PageNavigation:
    """Build the navigation controls for *window*.

    Args:
        window: The computed page window.
        url_for_page: Maps a page number to the URL that shows it.

    Returns:
        PageNavigation: Previous link when there is a prior page, one link per
        page unless the listing has a single page, and a next link per
        ``window.has_next``.
    """
    pages = (
        [
            PageLink(page=i, url=url_for_page(i), current=i == window.current_page)
            for i in window.page_indices
        ]
        if window.show_page_links
        else []
    )
    return PageNavigation(
        previous=url_for_page(window.current_page - 1) if window.has_previous else None,
        pages=pages,
        next=url_for_page(window.current_page + 1) if window.has_next else None,
    )
