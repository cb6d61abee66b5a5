"""User models."""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel, func

__all__ = ["User", "UserAll", "UserPublic"]


class _UserBase(SQLModel):
    """Base user model."""

    name: str = Field(description="Display name of the user")

    email: str = Field(description="E-mail address used to sign in")

    phone: str = Field(description="Phone number of the user")

    image: str = Field(description="Stored filename of the avatar image")


class UserAll(_UserBase):
    """User model for listing rows."""

    id: int = Field(description="Unique identifier for the user")

    created_at: datetime = Field(description="Timestamp when the user registered")


class UserPublic(UserAll):
    """User model for the detail view."""

    updated_at: datetime = Field(description="Timestamp when the user last changed")


class User(SQLModel, table=True):
    """User model."""

    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the user.",
    )

    name: str = Field(max_length=255, description="Display name of the user.")

    email: str = Field(
        index=True, unique=True, max_length=255, description="Sign-in e-mail address."
    )

    phone: str = Field(max_length=32, description="Phone number of the user.")

    image: str = Field(description="Stored filename of the avatar image.")

    password: str = Field(description="Password hash, never exposed by the API.")

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), insert_default=func.now()),
        description="Timestamp when the user registered.",
    )

    updated_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), onupdate=func.now(), insert_default=func.now()
        ),
        description="Timestamp when the user last changed.",
    )
