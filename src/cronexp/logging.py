"""Logging helpers shared by cronexp modules."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

from functools import cached_property
import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class WithLogger:
    """Mixin giving instances a logger named after their class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        return logging.getLogger(cls.__name__)

    @cached_property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Set the root logger level and attach a stream handler if none is configured.

    :param level: Numeric level or level name such as ``"DEBUG"``.
    :param fmt: Format string for the installed handler.
    :raises ValueError: If *level* is a string that names no logging level.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root_logger.addHandler(handler)
