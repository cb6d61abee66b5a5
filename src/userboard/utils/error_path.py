"""Get the path to the error handler module."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: Exception) -> str:
    """Extract formatted source location from an exception traceback.

    Formats the innermost frame as ``filename:line (fn:function_name)``, with
    the filename shortened to start at the userboard package.

    Args:
        err: The raised exception

    Returns:
        The formatted source location, or ``"unknown"`` without a traceback.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"

    filename, line, func, _ = frames[-1]
    if "userboard" in filename:
        filename = "userboard" + filename.rsplit("userboard", 1)[-1]
    return f"{filename}:{line} (fn:{func})"
