"""User router."""

from collections.abc import Callable
from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Request,
    Response,
    UploadFile,
    status,
)
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession

from userboard.config.db import get_session

from .models import UserPublic
from .schemas import UserCreate, UserPage
from .service import get_user_svc, get_users_page_svc, register_user_svc

__all__ = ["router"]


router = APIRouter(tags=["User"])


def _page_url_builder(request: Request) -> Callable[[int], str]:
    """Return a function mapping a page number to its listing path."""

    def url_for_page(page: int) -> str:
        return request.url_for("get_users_by_page", page=str(page)).path

    return url_for_page


@router.get("", summary="Get the first page of users")
async def get_users(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> UserPage:
    """Return the first page of the user listing.

    Args:
        request: The HTTP request object
        db: Database session for persistence operations

    Returns:
        UserPage: Users of page 1 with the page window and navigation.
    """
    page = await get_users_page_svc(db, None, _page_url_builder(request))
    logger.debug("Users page retrieved", page=page.page, total=page.total)
    return page


@router.get(
    "/page/{page}", name="get_users_by_page", summary="Get a page of users"
)
async def get_users_by_page(
    page: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> UserPage:
    """Return one page of the user listing.

    The page segment is taken as-is: non-numeric values show the first page,
    zero and negative values are clamped to 1, and pages past the end return
    no items.

    Args:
        page: Raw page segment from the URL
        request: The HTTP request object
        db: Database session for persistence operations

    Returns:
        UserPage: Users of the page with the page window and navigation.
    """
    result = await get_users_page_svc(db, page, _page_url_builder(request))
    logger.debug(
        "Users page retrieved",
        requested=page,
        page=result.page,
        totalpages=result.totalpages,
        items_count=len(result.items),
    )
    return result


@router.get("/{user_id}", summary="Get user by ID")
async def get_user(
    user_id: int, db: Annotated[AsyncSession, Depends(get_session)]
) -> UserPublic:
    """Retrieve a single user by its ID.

    Args:
        user_id: The ID of the user to retrieve
        db: Database session for persistence operations

    Returns:
        UserPublic: The user without the password hash.

    Raises:
        UserNotFoundError: If no user with that ID exists.
    """
    user = await get_user_svc(db, user_id)
    logger.debug("User retrieved", user_id=user_id)
    return user


@router.post("", summary="Register a user")
async def register_user(  # noqa: PLR0913, PLR0917
    request: Request,
    name: Annotated[str, Form(min_length=1, max_length=255)],
    email: Annotated[str, Form(min_length=3, max_length=255)],
    phone: Annotated[str, Form(min_length=1, max_length=32)],
    password: Annotated[str, Form(min_length=1)],
    file: Annotated[UploadFile, File(description="Avatar image")],
    db: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Register a new user with an avatar image.

    Args:
        request: The HTTP request object
        name: Display name
        email: Sign-in e-mail address
        phone: Phone number
        password: Plain password, stored hashed
        file: Avatar image
        db: Database session for persistence operations

    Returns:
        Response with status code 201 Created and the user path in the Location
        header.
    """
    data = UserCreate(name=name, email=email, phone=phone, password=password)
    user_id = await register_user_svc(db, data, file)
    logger.debug("User created", user_id=user_id)

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{request.url.path}/{user_id}"},
    )
