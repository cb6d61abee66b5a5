"""Banner generation for application."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from userboard.config.config import Settings

__all__ = ["create_banner"]


def _format_size(size: int) -> str:
    for unit in ("B", "KB", "MB"):
        if size < 1024:  # noqa: PLR2004
            return f"{size:.0f} {unit}"
        size /= 1024  # type: ignore[assignment]
    return f"{size:.1f} GB"


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    lines: list[str] = []

    banner = figlet_format("USERBOARD", font="slant")
    lines.extend([
        "\033[1;36m" + banner + "\033[0m",
        f"\033[1;33m Userboard Service v{settings.version}\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    host = "0.0.0.0" if settings.host_binding == "0.0.0.0" else "localhost"  # noqa: S104
    lines.extend([
        f"Environment: {env_color}{settings.app_env}\033[0m",
        f"API: http://{host}:{settings.port}{settings.root_path}",
        f"Docs: http://localhost:{settings.port}/docs",
        f"Metrics: http://localhost:{settings.port}/metrics",
    ])

    lines.extend([
        "\n\033[1;33mDatabase Configuration\033[0m",
        f"  - Engine: {settings.db_url.split('://')[0]}",
        f"  - Clear on Restart: {'yes' if settings.clear_db_on_restart else 'no'}",
        f"  - Seed on Start: {'yes' if settings.seed_db_on_start else 'no'}",
    ])

    lines.extend([
        "\n\033[1;33mUsers & Uploads\033[0m",
        f"  - Page Size: {settings.user_page_size}",
        f"  - Upload Directory: {settings.upload_dir}",
        f"  - Max Avatar Size: {_format_size(settings.avatar_max_upload_size)}",
        f"  - Image Types: {', '.join(sorted(settings.allowed_image_extensions))}",
    ])

    lines.extend([
        "\n\033[1;33mLogging Configuration\033[0m",
        f"  - Log Level: {settings.log_level}",
        f"  - Log Path: {settings.log_path if settings.app_env != 'production' else 'stderr'}",  # noqa: E501
    ])

    lines.extend([
        "\n\033[1;33mSystem Information\033[0m",
        f"  - OS: {platform.system()} {platform.release()}",
        f"  - Python: {sys.version.split()[0]}",
        f"  - Auto Reload: {'yes' if settings.reload else 'no'}",
        f"  - Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
