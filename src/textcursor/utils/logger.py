"""Logging setup for textcursor.

Every module logs through a child of the ``textcursor`` logger. The package
logger carries a NullHandler, so nothing is printed unless the application
configures logging or calls enable_debug_logging().

Only cold paths log, all at DEBUG: sub-view creation, config changes,
unterminated quoted literals, and bounds-check failures.

Example:
    >>> from textcursor import Cursor
    >>> from textcursor.utils.logger import disable_debug_logging, enable_debug_logging
    >>> handler = enable_debug_logging()
    >>> Cursor("abc").eat_quoted('"')  # logs "Unterminated ..." to stderr
    False
    >>> disable_debug_logging(handler)
"""

from __future__ import annotations

import logging
from typing import TextIO

ROOT_LOGGER_NAME = "textcursor"

DEBUG_FORMAT = "%(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``textcursor`` namespace.

    Args:
        name: Module name (typically __name__); prefixed with
            ``textcursor.`` when it is not already inside the package

    Returns:
        logging.Logger instance
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_debug_logging(stream: TextIO | None = None) -> logging.Handler:
    """Print textcursor's debug messages while writing a lexer.

    Args:
        stream: Destination (defaults to stderr)

    Returns:
        The installed handler, for disable_debug_logging()
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler


def disable_debug_logging(handler: logging.Handler) -> None:
    """Remove a handler installed by enable_debug_logging()."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
