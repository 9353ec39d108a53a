#!/usr/bin/env python3
# Justin, 2026-10-17
"""Thin wrappers over the standard 'logging' library.

Library modules only ever request a logger, i.e.

    logger = fsbox.logging.get_logger(__name__)

and never attach handlers themselves. Scripts configure output via
'set_default_handlers' and 'set_logging_level', which map the usual '-v'
counts onto logging levels.
"""

import logging
import sys
from typing import Optional, Union

__all__ = ["get_logger", "set_default_handlers", "set_logging_level"]

# Verbosity count -> logging level, e.g. '-v' gives INFO
LEVELS = [
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]
DEFAULT_FORMAT = "{asctime}\t{levelname:<7s}\t{funcName}:{lineno}\t| {message}"
DEFAULT_DATEFMT = "%Y%m%d_%H%M%S"


def get_logger(name: str, level: Union[int, str, None] = None):
    """Returns logger of the given name, with level optionally set."""
    logger = logging.getLogger(name)
    if level is not None:
        set_logging_level(logger, level)
    return logger


def set_logging_level(logger, verbosity: Union[int, str]):
    """Sets logger level from a verbosity count or level name.

    Examples:
        >>> set_logging_level(logger, 0)  # WARNING
        >>> set_logging_level(logger, 3)  # DEBUG, saturates
        >>> set_logging_level(logger, "info")
    """
    if isinstance(verbosity, str):
        level = logging.getLevelName(verbosity.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unrecognized logging level '{verbosity}'")
    else:
        if verbosity < 0:
            raise ValueError("Verbosity must be non-negative")
        level = LEVELS[min(verbosity, len(LEVELS) - 1)]
    logger.setLevel(level)
    return level


def set_default_handlers(
    logger,
    file: Optional[str] = None,
    stream=sys.stderr,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
):
    """Replaces logger handlers with a stream and/or file handler.

    Args:
        logger: Logger to configure.
        file: Path to log file, appended to if it exists.
        stream: Stream to log to, or None to disable.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt, style="{")
    handlers = []
    if stream is not None:
        handlers.append(logging.StreamHandler(stream))
    if file is not None:
        handlers.append(logging.FileHandler(file, mode="a", encoding="utf8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return handlers
