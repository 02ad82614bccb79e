"""Log utilities."""

import logging
import os
from rich.logging import RichHandler

from constants import PAGE_TELEMETRY_LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL


def resolve_log_level(level_name: str | None) -> int | None:
    """
    Convert a log level name into a logging level constant.

    Parameters:
        level_name (str | None): Level name in any case, e.g. "debug".

    Returns:
        int | None: The level constant, or None for unknown names.
    """
    if not level_name:
        return None
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    return level if isinstance(level, int) else None


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger printing to the console through Rich.

    The level is read from the PAGE_TELEMETRY_LOG_LEVEL environment
    variable. Unknown names fall back to INFO with a warning. The logger
    gets a single RichHandler and does not propagate to ancestor loggers,
    so host loggers are left alone.

    Parameters:
        name (str): Name of the logger to retrieve or create.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return logger

    logger.handlers = [RichHandler(show_path=False)]
    logger.propagate = False

    requested = os.environ.get(PAGE_TELEMETRY_LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = resolve_log_level(requested)
    if level is None:
        logger.warning(
            "Invalid log level '%s', falling back to %s", requested, DEFAULT_LOG_LEVEL
        )
        level = logging.getLevelNamesMapping()[DEFAULT_LOG_LEVEL]

    logger.setLevel(level)
    return logger
