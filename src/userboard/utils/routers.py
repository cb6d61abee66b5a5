"""Router Initializer."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from userboard.auth.router import dashboard_router
from userboard.auth.router import router as auth_router
from userboard.common.router import router as common_router
from userboard.config import settings
from userboard.user.router import router as user_router


def register_routers(app: FastAPI) -> None:
    """Register all API routers and the avatar mount with the application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(auth_router, prefix="/auth")
    app.include_router(dashboard_router, prefix="/dashboard")
    app.include_router(user_router, prefix="/users")

    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )
