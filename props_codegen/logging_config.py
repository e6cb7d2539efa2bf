"""Logging configuration for props-codegen.

Modules obtain loggers through :func:`get_logger`; the command line entry
point calls :func:`configure_logging` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "props_codegen"


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Configure package logging with a rich handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Console to log to; stderr when omitted.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a package module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Standard library logger.
    """
    return logging.getLogger(name)
