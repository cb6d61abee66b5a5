"""Logger configuration."""

import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any, Final

from loguru import logger
from loki_logger_handler.formatters.loguru_formatter import LoguruFormatter
from loki_logger_handler.loki_logger_handler import LokiLoggerHandler

from .config import settings

__all__ = ["InterceptHandler", "config_logger"]


_LOKI_URL: Final = "http://alloy:9999/loki/api/v1/push"  # NOSONAR
_STD_LOGGERS: Final = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy")


def config_logger() -> None:
    """Route all application and library logging through loguru.

    Development and testing write a coloured console stream plus a rotating
    file under ``settings.log_path``. Production writes a compact stream to
    stderr and ships structured records to Loki.
    """
    is_production = settings.app_env == "production"

    _intercept_std_logging()
    logger.remove()

    if not is_production:
        logger.add(
            settings.log_path,
            rotation=settings.rotation,
            format=_plain_format,
            enqueue=True,
            backtrace=False,
            diagnose=False,
            compression="zip",
            colorize=False,
            level=logging.DEBUG,
        )

    logger.add(
        sys.stderr if is_production else sys.stdout,
        format=_plain_format if is_production else _development_format,
        level=settings.log_level,
        colorize=not is_production,
        enqueue=True,
        backtrace=not is_production,
        diagnose=not is_production,
        catch=not is_production,
    )

    if is_production:
        logger.add(
            LokiLoggerHandler(
                url=_LOKI_URL,
                labels={
                    "application": "userboard",
                    "environment": settings.app_env,
                    "version": settings.version,
                },
                timeout=5,
                enable_structured_loki_metadata=True,
                default_formatter=LoguruFormatter(),  # type: ignore[arg-type]
            ),
            serialize=True,
            enqueue=True,
            level=settings.log_level,
        )


def _intercept_std_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in _STD_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = []
        std_logger.propagate = True


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        """Intercepts standard logging and sends it to Loguru."""
        if "changes detected" in record.getMessage():
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _record_format(*, colour: bool) -> Callable[[Mapping[str, Any]], str]:
    """Build a loguru format function.

    The returned function yields a template per record; ``{message}`` and the
    ``{extra[...]}`` fields are filled in by loguru so braces in messages are
    never reinterpreted.
    """

    def paint(tag: str, text: str) -> str:
        return f"<{tag}>{text}</{tag}>" if colour else text

    def fmt(record: Mapping[str, Any]) -> str:
        ts = record["time"].strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = f"{record['level']:<8}"
        where = f"{record['name']}:{record['function']}:{record['line']}"
        line = (
            f"{paint('green', ts)} | "
            f"{paint('level', level)} | "
            f"{paint('cyan', where)} - {{message}}"
        )
        extras = [
            f"{paint('yellow', key)}={paint('cyan', f'{{extra[{key}]}}')}"
            for key in record["extra"]
        ]
        if extras:
            line += " | " + " | ".join(extras)
        return line + "\n{exception}"

    return fmt


_development_format: Final = _record_format(colour=True)
_plain_format: Final = _record_format(colour=False)
