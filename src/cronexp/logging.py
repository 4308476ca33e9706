"""Logging helpers shared across the package."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the logger for *cls*; the logging module caches it by name."""
        return logging.getLogger(cls.__name__)

    @property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Set the root logger *level*, attaching a stream handler with *fmt* when it has none.

    :param level: Numeric level or a level name such as ``"DEBUG"``.
    :param fmt: Format string for the installed handler.
    :raises ValueError: If *level* is a string that is not a logging level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
