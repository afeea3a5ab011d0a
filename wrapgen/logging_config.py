"""Logging setup for wrapgen.

Modules obtain loggers through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "wrapgen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Configure the package logger to write through rich.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
