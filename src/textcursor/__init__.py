"""
textcursor — Text Cursor for Hand-Written Lexers

A small, dependency-free reader that scans an immutable string one character
at a time, with lookahead, predicate-based consumption, quoted-literal
scanning, and bounded sub-views. It has no grammar and no token types; it is
the piece a tokenizer is built on.

Quick Start:
    >>> from textcursor import Cursor
    >>> cursor = Cursor('color: "red" ;')
    >>> cursor.consume(str.isalpha)
    'color'
    >>> cursor.eat(":") and cursor.eat_while(" ")
    True
    >>> cursor.save()
    7
    >>> quote = cursor.next()
    >>> cursor.eat_quoted(quote)
    True
    >>> cursor.current()
    '"red"'

Match specs:
    eat(), eat_while(), consume() and expect() accept a character, a
    character code, a predicate, a compiled regex, or a set of characters.

    >>> from textcursor.chars import DIGITS
    >>> Cursor("2024-01").consume(DIGITS)
    '2024'

Sub-views:
    >>> from textcursor import create, limit
    >>> view = limit(create("foo bar baz"), 4, 7)
    >>> "".join(iter(view.next, ""))
    'bar'
"""

from textcursor.chars import (
    ALPHA,
    ALPHANUMERIC,
    DIGITS,
    QUOTES,
    SPACE,
    WHITESPACE,
    is_alpha,
    is_alpha_numeric,
    is_number,
    is_quote,
    is_space,
    is_white_space,
)
from textcursor.config import (
    ReaderConfig,
    get_reader_config,
    reader_config_context,
    reset_reader_config,
    set_reader_config,
)
from textcursor.cursor import Cursor, create, limit
from textcursor.errors import CursorBoundsError, CursorError, TextCursorError
from textcursor.matchers import (
    ExactChar,
    ExactCode,
    MatchLike,
    MatchSpec,
    Pattern,
    Predicate,
    as_matcher,
)

__version__ = "0.1.0"

__all__ = [
    # Cursor
    "Cursor",
    "create",
    "limit",
    # Match specs
    "MatchSpec",
    "MatchLike",
    "ExactCode",
    "ExactChar",
    "Predicate",
    "Pattern",
    "as_matcher",
    # Character classes
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
    # Errors
    "TextCursorError",
    "CursorError",
    "CursorBoundsError",
    # Configuration (ContextVar-based)
    "ReaderConfig",
    "get_reader_config",
    "set_reader_config",
    "reset_reader_config",
    "reader_config_context",
]
