"""Logging configuration for sgrfmt.

The library itself only ever logs through module-level loggers under the
``sgrfmt`` namespace. This module lets the CLI (or an application) decide
whether those records go anywhere.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional, TextIO, Union

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


class LogLevel(IntEnum):
    """Log levels understood by configure_logging."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    NONE = logging.CRITICAL + 10

    @classmethod
    def from_string(cls, value: Union[str, int, None]) -> "LogLevel":
        """Convert a level name (case-insensitive) or number to a LogLevel.

        Args:
            value: Level name such as "debug", a numeric level, or None

        Returns:
            The matching LogLevel; None maps to LogLevel.NONE

        Raises:
            ValueError: If the name is not a known level
        """
        if value is None:
            return cls.NONE
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value}")


def configure_logging(
    level: int = LogLevel.NONE,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``sgrfmt`` logger.

    Args:
        level: Minimum level to emit; LogLevel.NONE silences the package
        fmt: Format string for emitted records
        stream: Destination stream, stderr by default

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("sgrfmt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if level >= LogLevel.NONE:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(LogLevel.NONE)
        logger.propagate = False
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    logger.debug(f"Logging configured at level {logging.getLevelName(int(level))}")
    return logger
