"""Loguru setup for the estimator service and the servers it runs under."""

from __future__ import annotations

import logging
import sys

from types import FrameType

from loguru import logger

from estimator import __version__
from estimator.core.settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{extra[app]} {extra[environment]} | <cyan>{name}</cyan>:{line} - {message}"
)
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class InterceptHandler(logging.Handler):
    """Hands standard library records over to Loguru, keeping the caller frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).bind(
            stdlib_logger=record.name
        ).log(level, record.getMessage())


def log_context() -> dict[str, str]:
    """Fields attached to every estimator log record."""
    return {
        "app": "estimator",
        "version": __version__,
        "environment": settings.environment,
    }


def configure_logging() -> None:
    """Sends estimator logs to stdout, as JSON lines unless disabled in settings."""
    logger.remove()
    logger.configure(extra=log_context())
    if settings.log_serialize:
        logger.add(
            sys.stdout,
            level=settings.log_level,
            serialize=True,
            backtrace=True,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            level=settings.log_level,
            format=LOG_FORMAT,
            backtrace=True,
            diagnose=False,
        )
    reset_standard_handlers()


def reset_standard_handlers() -> None:
    """Points the root and uvicorn loggers at Loguru."""
    intercept = InterceptHandler()
    logging.basicConfig(handlers=[intercept], level=0)
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [intercept]
        uvicorn_logger.propagate = False
