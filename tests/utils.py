"""Utils for registration tests."""

from typing import Final

__all__ = ["PNG_BYTES", "get_avatar_file", "registration_form"]


PNG_BYTES: Final = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def get_avatar_file(
    filename: str = "avatar.png",
    content: bytes = PNG_BYTES,
    mime_type: str = "image/png",
) -> dict[str, tuple[str, bytes, str]]:
    """Return an avatar in the format expected by TestClient file uploads."""
    return {"file": (filename, content, mime_type)}


def registration_form(**overrides: str) -> dict[str, str]:
    """Return valid registration fields, with *overrides* applied."""
    form = {
        "name": "Linus Torvalds",
        "email": "linus@example.com",
        "phone": "+358 9 555 0108",
        "password": "penguin42",
    }
    form.update(overrides)
    return form
