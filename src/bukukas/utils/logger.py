"""Logging helpers for bukukas."""

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "bukukas"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "bukukas-console"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger in the bukukas hierarchy."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def parse_level(level: Union[str, int]) -> int:
    """Convert a level name or number into a logging level.

    Raises:
        ValueError: If the name is not a known logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value


def configure_logging(level: Union[str, int] = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the bukukas root logger.

    Calling this again changes the level and re-points the handler at the
    current ``sys.stderr``.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(parse_level(level))

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setStream(sys.stderr)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
