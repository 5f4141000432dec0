"""Character classes for use as match specs.

All sets are frozensets for O(1) membership testing and can be passed
directly to Cursor.eat() / eat_while() / consume().

The predicates accept either a character or a character code, so they work
both as plain predicates and with ``Predicate(..., by_code=True)``.

Usage:
    from textcursor.chars import is_space, DIGITS

    cursor.eat_while(is_space)
    number = cursor.consume(DIGITS)
"""

from __future__ import annotations

SPACE: frozenset[str] = frozenset(" \t")
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")
DIGITS: frozenset[str] = frozenset("0123456789")
ALPHA: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
ALPHANUMERIC: frozenset[str] = ALPHA | DIGITS
QUOTES: frozenset[str] = frozenset("\"'")


def _as_char(unit: str | int | None) -> str:
    if isinstance(unit, int):
        return chr(unit)
    return unit or ""


def is_quote(unit: str | int | None) -> bool:
    """Check if unit is a single or double quote."""
    return _as_char(unit) in QUOTES


def is_space(unit: str | int | None) -> bool:
    """Check if unit is a space or a tab (no line breaks)."""
    return _as_char(unit) in SPACE


def is_white_space(unit: str | int | None) -> bool:
    """Check if unit is ASCII whitespace, including line breaks."""
    return _as_char(unit) in WHITESPACE


def is_number(unit: str | int | None) -> bool:
    """Check if unit is an ASCII digit."""
    return _as_char(unit) in DIGITS


def is_alpha(unit: str | int | None) -> bool:
    """Check if unit is an ASCII letter."""
    return _as_char(unit) in ALPHA


def is_alpha_numeric(unit: str | int | None) -> bool:
    """Check if unit is an ASCII letter or digit."""
    return _as_char(unit) in ALPHANUMERIC


__all__ = [
    "ALPHA",
    "ALPHANUMERIC",
    "DIGITS",
    "QUOTES",
    "SPACE",
    "WHITESPACE",
    "is_alpha",
    "is_alpha_numeric",
    "is_number",
    "is_quote",
    "is_space",
    "is_white_space",
]
