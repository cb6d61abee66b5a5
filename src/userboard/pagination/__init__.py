"""Pagination module.

Offset/limit paging over a total-count-driven page list:

- compute_window: normalises a requested page and derives offset, limit,
  page count and navigation flags from a record count
- build_navigation: turns a window into previous / numbered / next links
"""

from .navigation import PageLink, PageNavigation, build_navigation
from .window import PageWindow, coerce_page, compute_window

__all__ = [
    "PageLink",
    "PageNavigation",
    "PageWindow",
    "build_navigation",
    "coerce_page",
    "compute_window",
]
