"""Utilities for user handling."""

from .avatar_fs import delete_avatar, save_avatar

__all__ = ["delete_avatar", "save_avatar"]
