"""Default logger backed by the standard ``logging`` module."""

import logging
from typing import Any, Optional

from app.logger.interface import Logger


def format_context(message: str, kwargs: dict) -> str:
    """Render ``message`` followed by ``key=value`` pairs in call order."""
    if not kwargs:
        return message
    context = " ".join(f"{key}={value}" for key, value in kwargs.items())
    return f"{message} | {context}"


class DefaultLogger(Logger):
    """Logger that forwards to a named ``logging.Logger``.

    Handlers and levels are left to the application's logging configuration.
    """

    def __init__(self, name: str = "datagen", level: Optional[int] = None):
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(format_context(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(format_context(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(format_context(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(format_context(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(format_context(message, kwargs))
