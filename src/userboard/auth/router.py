"""Auth router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.config.db import get_session
from userboard.user.models import User, UserPublic

from .dependency import get_current_user
from .schemas import LoginRequest, LoginResponse
from .service import login_svc, logout_svc

__all__ = ["dashboard_router", "router"]


router = APIRouter(tags=["Auth"])
dashboard_router = APIRouter(tags=["Dashboard"])


@router.post("/login", summary="Sign in")
async def login(
    credentials: LoginRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LoginResponse:
    """Sign in with e-mail and password.

    Args:
        credentials: E-mail and password
        request: The HTTP request carrying the session
        db: Database session for persistence operations

    Returns:
        LoginResponse: Confirmation with the signed-in user's ID.

    Raises:
        InvalidCredentialsError: If the credentials do not match.
    """
    user = await login_svc(db, request, credentials.email, credentials.password)
    return LoginResponse(message="Signed in", user_id=user.id)  # type: ignore[arg-type]


@router.get("/logout", summary="Sign out")
async def logout(request: Request) -> Response:
    """Flush the session and sign out."""
    logout_svc(request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@dashboard_router.get("", summary="Dashboard of the signed-in user")
async def dashboard(
    user: Annotated[User, Depends(get_current_user)],
) -> UserPublic:
    """Return the signed-in user.

    Raises:
        NotAuthenticatedError: If nobody is signed in.
    """
    return UserPublic.model_validate(user)
