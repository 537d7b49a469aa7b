"""logger configuration for fpy"""

import logging
import sys

from .config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "fpy",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name, child modules log under it
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, level.upper()))

    return logger


logger = setup_logger()
