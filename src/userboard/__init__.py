"""Declaration of the root package userboard."""

from userboard.app import app
from userboard.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server."""
    run()
