"""Console logger: a DefaultLogger that owns a stderr handler."""

import logging
import sys
from typing import Optional

from app.logger.default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class ConsoleLogger(DefaultLogger):
    """Writes formatted records to stderr.

    The handler is attached once per logger name so that creating several
    ConsoleLogger instances does not duplicate output.
    """

    def __init__(self, name: str = "datagen", level: Optional[int] = logging.INFO):
        super().__init__(name=name, level=level)
        if not any(getattr(h, "_datagen_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._datagen_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self._logger.propagate = False
