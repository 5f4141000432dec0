"""Utility modules for textcursor.

Provides:
- logger: get_logger, enable_debug_logging, disable_debug_logging
"""

from textcursor.utils.logger import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
)

__all__ = [
    "disable_debug_logging",
    "enable_debug_logging",
    "get_logger",
]
