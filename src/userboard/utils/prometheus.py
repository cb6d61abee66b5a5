"""Prometheus metrics for tracking custom metrics."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Counter, Gauge

__all__ = ["OUT_OF_RANGE_PAGES", "add_prometheus_metrics"]


REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress_total",
    "Active HTTP requests",
    ["method", "section"],
)

OUT_OF_RANGE_PAGES = Counter(
    "userboard_out_of_range_pages_total",
    "Listing pages requested beyond the last page",
)


def _section(path: str) -> str:
    """First path segment, keeping label cardinality bounded."""
    return "/" + path.strip("/").split("/", 1)[0]


def add_prometheus_metrics(app: FastAPI) -> None:
    """Configure the FastAPI application to track in-flight HTTP requests.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """

    @app.middleware("http")
    async def track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Middleware to track the number of in-flight requests."""
        labels = REQUESTS_IN_PROGRESS.labels(request.method, _section(request.url.path))
        labels.inc()
        try:
            return await call_next(request)
        finally:
            labels.dec()
