"""Logging configuration helpers."""

from __future__ import annotations

import logging
import sys

from loguru import logger

_LOGGING_CONFIGURED = False

# Third-party loggers that install their own handlers and would otherwise bypass loguru.
_INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine")


class _InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = level.upper()
    logging.basicConfig(handlers=[_InterceptHandler()], level=logging.getLevelName(level), force=True)
    for name in _INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [_InterceptHandler()]
        std_logger.propagate = False

    logger.remove()
    logger.add(sys.stderr, level=level, enqueue=True, backtrace=True, diagnose=False)

    _LOGGING_CONFIGURED = True


__all__ = ["configure_logging", "logger"]
