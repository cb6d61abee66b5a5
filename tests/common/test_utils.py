# ruff: noqa: S101

"""Tests for filename sanitising and password hashing."""

from io import BytesIO

import pytest
from fastapi import UploadFile

from userboard.common.exceptions import InvalidFileError, UnsupportedFormatError
from userboard.utils.file_sanitizer import sanitize_filename
from userboard.utils.password import hash_password, verify_password

_IMAGES = frozenset({"png", "jpg"})


def _upload(filename: str | None) -> UploadFile:
    return UploadFile(file=BytesIO(b"x"), filename=filename)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("avatar.png", ("avatar.png", "png")),
        ("Holiday Photo.JPG", ("Holiday_Photo.jpg", "jpg")),
        ("../../etc/me.png", ("me.png", "png")),
        ("ümlaut-ok_1.png", ("_mlaut-ok_1.png", "png")),
    ],
)
def test_sanitize_filename(filename: str, expected: tuple[str, str]) -> None:
    """Filenames are reduced to safe characters and a lower-case extension."""
    assert sanitize_filename(_upload(filename), _IMAGES) == expected


@pytest.mark.parametrize("filename", [None, "", "noextension", ".png"])
def test_sanitize_filename_invalid(filename: str | None) -> None:
    """Missing names or extensions are rejected."""
    with pytest.raises(InvalidFileError):
        sanitize_filename(_upload(filename), _IMAGES)


def test_sanitize_filename_too_long() -> None:
    """Overlong names are rejected."""
    with pytest.raises(InvalidFileError):
        sanitize_filename(_upload("a" * 500 + ".png"), _IMAGES)


def test_sanitize_filename_unsupported() -> None:
    """Extensions outside the allowed set are unsupported."""
    with pytest.raises(UnsupportedFormatError):
        sanitize_filename(_upload("script.exe"), _IMAGES)


def test_password_hash_roundtrip() -> None:
    """A hash verifies its own password and nothing else."""
    hashed = hash_password("penguin42")

    assert hashed != "penguin42"
    assert verify_password("penguin42", hashed)
    assert not verify_password("penguin43", hashed)


def test_verify_password_malformed_hash() -> None:
    """A stored value that is not a hash never verifies."""
    assert not verify_password("penguin42", "not-a-hash")
