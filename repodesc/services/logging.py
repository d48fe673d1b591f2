"""
Diagnostics for repodesc.

stdout carries the descriptor, so every message goes to stderr and,
when ``[logging] file = true``, to a rotating log under ~/.repodesc.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _to_level(name: str) -> int:
    """Map a configured level name to a logging level; unknown names mean WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


class RepodescLogger(ILogger):
    """ILogger backed by a dedicated, non-propagating stdlib logger."""

    LOG_FILE_PATH = Path.home() / ".repodesc" / "repodesc.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        name: str = "repodesc",
        level: str = "warning",
        console_enabled: bool = True,
        file_enabled: bool = False,
    ) -> None:
        self._logger = logging.getLogger(name)
        # Handlers filter by level; the logger itself passes everything
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        if console_enabled:
            self._console_handler = self._attach(logging.StreamHandler(sys.stderr))
        if file_enabled:
            self.LOG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)
            self._file_handler = self._attach(
                RotatingFileHandler(
                    self.LOG_FILE_PATH,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                )
            )
        self.set_level(level)

    def _attach(self, handler: logging.Handler) -> logging.Handler:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self._logger.addHandler(handler)
        return handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Apply level to the console and file handlers (--log-level)."""
        for handler in (self._console_handler, self._file_handler):
            if handler is not None:
                handler.setLevel(_to_level(level))


class NullLogger(ILogger):
    """Discards everything. Used until bootstrap registers a real logger."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
