"""
Logger module for datagen

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from app.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Application started")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging
import os

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger


def _resolve_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(
    level=_resolve_level(os.environ.get("DATAGEN_LOG_LEVEL", "INFO"))
)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
