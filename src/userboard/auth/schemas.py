"""Auth schemas."""

from pydantic import BaseModel, Field

__all__ = ["LoginRequest", "LoginResponse"]


class LoginRequest(BaseModel):
    """Credentials submitted to sign in."""

    email: str = Field(min_length=1, description="Registered e-mail address")
    password: str = Field(min_length=1, description="Plain password")


class LoginResponse(BaseModel):
    """Confirmation of a successful sign-in."""

    message: str
    user_id: int
