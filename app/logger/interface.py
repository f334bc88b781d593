"""Logger interface for datagen.

Every component receives a ``Logger`` rather than calling ``logging`` directly,
so structured context can be passed as keyword arguments:

    logger.info("Session created", session_id=sid, ttl_seconds=600)
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract structured logger."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
