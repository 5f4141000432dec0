"""ContextVar-based reader configuration for textcursor.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Cursor reads the active config once, when it is constructed; changing the
config afterwards does not affect cursors that already exist.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from textcursor.config import ReaderConfig, reader_config_context

    with reader_config_context(ReaderConfig(check_bounds=True)):
        cursor = Cursor(source)
        cursor.back_up(1)  # raises CursorBoundsError at offset 0

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from textcursor.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Immutable reader configuration.

    Attributes:
        escape: Default escape character for Cursor.eat_quoted()
        check_bounds: Raise CursorBoundsError when back_up()/save() leave
            the cursor's range (debugging aid, off by default)
        include_source_in_errors: Append the quoted source string to
            CursorError messages

    """

    escape: str = "\\"
    check_bounds: bool = False
    include_source_in_errors: bool = True

    def __post_init__(self) -> None:
        if len(self.escape) != 1:
            raise ValueError(
                f"escape must be a single character, got {self.escape!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ReaderConfig:
        """Create ReaderConfig from dictionary.

        Only includes keys that are valid ReaderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values

        Returns:
            New ReaderConfig instance

        Example:
            >>> ReaderConfig.from_dict({"check_bounds": True, "other": 1})
            ReaderConfig(escape='\\\\', check_bounds=True, include_source_in_errors=True)
        """
        valid = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid})


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ReaderConfig = ReaderConfig()

_reader_config: ContextVar[ReaderConfig] = ContextVar(
    "reader_config",
    default=_DEFAULT_CONFIG,
)


def get_reader_config() -> ReaderConfig:
    """Get current reader configuration (thread-local).

    Returns:
        The active ReaderConfig for this thread/context.

    """
    return _reader_config.get()


def set_reader_config(config: ReaderConfig) -> None:
    """Set reader configuration for current context.

    Args:
        config: ReaderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    logger.debug("Reader config set: %r", config)
    _reader_config.set(config)


def reset_reader_config() -> None:
    """Reset to default configuration."""
    _reader_config.set(_DEFAULT_CONFIG)


@contextmanager
def reader_config_context(config: ReaderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ReaderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with reader_config_context(ReaderConfig(escape="^")):
        ...     cursor = Cursor('a^"b"')
        ...     cursor.eat_quoted('"')
        True

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _reader_config.set(config)
    try:
        yield
    finally:
        _reader_config.reset(token)


__all__ = [
    "ReaderConfig",
    "get_reader_config",
    "set_reader_config",
    "reset_reader_config",
    "reader_config_context",
]
