"""Mutable text cursor for hand-written lexers.

A Cursor scans an immutable string one character at a time. It keeps two
offsets: ``pos`` (where reading continues) and ``start`` (where the current
token began), plus the ``[lower, end)`` range it is allowed to traverse.

Failure is signaled through return values: matching operations return
False, accessors return ``""`` or None at end-of-range, and diagnostics are
built as CursorError values. Nothing in the scanning path raises.

Usage:
    >>> cursor = Cursor("width: 100px")
    >>> cursor.consume(str.isalpha)
    'width'
    >>> cursor.eat(":")
    True
    >>> cursor.eat_while(" ")
    True
    >>> cursor.consume(str.isdigit)
    '100'

Thread Safety:
Cursors over the same string (including sub-views from limit()) advance
independently. A single Cursor instance is not safe for concurrent mutation.

"""

from __future__ import annotations

from textcursor.config import get_reader_config
from textcursor.errors import CursorBoundsError, CursorError
from textcursor.matchers import (
    ExactChar,
    ExactCode,
    MatchLike,
    MatchSpec,
    Pattern,
    as_matcher,
)
from textcursor.utils.logger import get_logger

logger = get_logger(__name__)


def _as_unit(unit: str | int) -> str:
    """Normalize a character or character code to a one-character string."""
    if isinstance(unit, int):
        return chr(unit)
    if not unit:
        raise ValueError("expected a character or character code, got ''")
    return unit[0]


def _describe(matcher: MatchSpec) -> str:
    if isinstance(matcher, ExactChar):
        return repr(matcher.char[0])
    if isinstance(matcher, ExactCode):
        return repr(chr(matcher.code))
    if isinstance(matcher, Pattern):
        return f"character matching {getattr(matcher.pattern, 'pattern', matcher.pattern)!r}"
    # Lambdas and dunder methods (set.__contains__) have no useful name
    name = getattr(matcher.func, "__name__", "")
    if name.isidentifier() and not name.startswith("_"):
        return f"character matching {name}"
    return "matching character"


class Cursor:
    """Stateful reader positioned within a string.

    All offsets are absolute indices into ``string``. A cursor created by
    limit() shares ``string`` with its parent but owns its offsets.

    Attributes:
        string: The source text (never copied or modified)
        pos: Current read offset
        start: Start of the current token, set by save()
        lower: First offset this cursor may read
        end: Offset where this cursor's input ends (exclusive)

    """

    __slots__ = ("string", "pos", "start", "lower", "end", "_config")

    def __init__(
        self,
        string: str,
        start: int = 0,
        *,
        lower: int = 0,
        end: int | None = None,
    ) -> None:
        """Initialize cursor over ``string``.

        Out-of-range offsets are clamped so that
        ``0 <= lower <= pos <= end <= len(string)``.

        Args:
            string: Source text
            start: Initial value of both ``pos`` and ``start``
            lower: Lower bound of the readable range
            end: Upper bound of the readable range (defaults to ``len(string)``)
        """
        length = len(string)
        end = length if end is None else max(0, min(end, length))
        lower = max(0, min(lower, end))

        self.string = string
        self.lower = lower
        self.end = end
        self.pos = self.start = max(lower, min(start, end))
        # Read once; later config changes do not affect existing cursors
        self._config = get_reader_config()

    def __repr__(self) -> str:
        return (
            f"Cursor(pos={self.pos}, start={self.start}, "
            f"range=[{self.lower}, {self.end}))"
        )

    # =========================================================================
    # Bounds
    # =========================================================================

    def limit(self, lower: int, upper: int) -> Cursor:
        """Create an independent cursor over ``[lower, upper)`` of the same string.

        The new cursor starts at ``lower`` and reaches eof() at ``upper``,
        even when the string continues beyond it. Moving either cursor never
        moves the other. The sub-view keeps this cursor's ReaderConfig.

        Args:
            lower: First readable offset of the sub-view
            upper: End of the sub-view (exclusive)

        Returns:
            New Cursor sharing this cursor's string
        """
        logger.debug(
            "Sub-view [%d, %d) over %d characters", lower, upper, len(self.string)
        )
        view = Cursor(self.string, lower, lower=lower, end=upper)
        # A sub-view scans with its parent's settings, not the ones active now
        view._config = self._config
        return view

    def eof(self) -> bool:
        """Return True when there is no more input in range."""
        return self.pos >= self.end

    def eol(self) -> bool:
        """Alias of eof()."""
        return self.pos >= self.end

    def sol(self) -> bool:
        """Return True when positioned at the start of the range."""
        return self.pos == self.lower

    # =========================================================================
    # Lookahead and advance
    # =========================================================================

    def peek(self) -> str:
        """Return the next character without advancing, or ``""`` at end."""
        if self.pos < self.end:
            return self.string[self.pos]
        return ""

    def peek_code(self) -> int | None:
        """Return the next character code without advancing, or None at end."""
        if self.pos < self.end:
            return ord(self.string[self.pos])
        return None

    def next(self) -> str:
        """Return the next character and advance.

        At end-of-range returns ``""`` and does not advance.
        """
        if self.pos < self.end:
            char = self.string[self.pos]
            self.pos += 1
            return char
        return ""

    def next_code(self) -> int | None:
        """Return the next character code and advance, or None at end."""
        if self.pos < self.end:
            code = ord(self.string[self.pos])
            self.pos += 1
            return code
        return None

    def back_up(self, n: int = 1) -> None:
        """Move ``pos`` back by ``n`` characters.

        Backing up past ``start`` of the current token or past ``lower`` is
        not checked unless ReaderConfig.check_bounds is enabled. A negative
        ``pos`` follows Python indexing: peek() and next() then read from the
        end of the string, and next() walks ``pos`` forward towards 0.

        Raises:
            CursorBoundsError: If bounds checking is enabled and ``pos``
                would drop below ``lower``
        """
        if self._config.check_bounds and self.pos - n < self.lower:
            logger.debug("back_up(%d) from %d leaves range", n, self.pos)
            raise CursorBoundsError("back_up", self.pos - n, self.lower, self.end)
        self.pos -= n

    # =========================================================================
    # Predicate matching
    # =========================================================================

    def eat(self, match: MatchLike) -> bool:
        """Consume the next character if it matches.

        Args:
            match: Character, character code, predicate, regex, character
                set, or MatchSpec (see textcursor.matchers)

        Returns:
            True if a character was consumed. Always False at end-of-range.
        """
        if self.pos >= self.end:
            return False
        if as_matcher(match).test(self.string[self.pos]):
            self.pos += 1
            return True
        return False

    def eat_while(self, match: MatchLike) -> bool:
        """Consume characters while they match.

        Greedy with no backtracking: stops at the first non-matching
        character or at end-of-range.

        Returns:
            True if at least one character was consumed.
        """
        matcher = as_matcher(match)
        string = self.string
        end = self.end
        start = self.pos
        while self.pos < end and matcher.test(string[self.pos]):
            self.pos += 1
        return self.pos != start

    def skip_to(self, needle: str | int) -> bool:
        """Move ``pos`` to the next occurrence of ``needle`` without consuming it.

        Only the remaining range ``[pos, end)`` is searched. A string needle
        must lie entirely inside the range to be found.

        Args:
            needle: Character code, character, or literal string

        Returns:
            True if found. On False, ``pos`` is unchanged.
        """
        if isinstance(needle, int):
            needle = chr(needle)
        elif not needle:
            raise ValueError("skip_to() needs a non-empty needle")
        index = self.string.find(needle, self.pos, self.end)
        if index == -1:
            return False
        self.pos = index
        return True

    def expect(self, match: MatchLike, message: str | None = None) -> str | CursorError:
        """Consume one matching character, or describe why it could not be.

        Result-value form of eat(): the returned CursorError is falsy, so
        callers can write ``if not (char := cursor.expect(":")): ...``.

        Args:
            match: Anything accepted by eat()
            message: Error message to use instead of the generated one

        Returns:
            The consumed character, or a CursorError (``pos`` unchanged)
        """
        matcher = as_matcher(match)
        if self.pos < self.end:
            char = self.string[self.pos]
            if matcher.test(char):
                self.pos += 1
                return char
            if message is None:
                message = f"Expected {_describe(matcher)}, got {char!r}"
        elif message is None:
            message = f"Unexpected end of input, expected {_describe(matcher)}"
        return self.error(message)

    # =========================================================================
    # Token extraction
    # =========================================================================

    def save(self, offset: int | None = None) -> int:
        """Mark the start of the current token.

        Args:
            offset: New ``start`` (defaults to ``pos``); clamped to ``end``

        Returns:
            The new ``start``

        Raises:
            CursorBoundsError: If bounds checking is enabled and ``offset``
                lies outside ``[lower, end]``
        """
        start = self.pos if offset is None else offset
        if self._config.check_bounds and not self.lower <= start <= self.end:
            logger.debug("save(%d) outside [%d, %d]", start, self.lower, self.end)
            raise CursorBoundsError("save", start, self.lower, self.end)
        self.start = min(start, self.end)
        return self.start

    def current(self) -> str:
        """Return the text between ``start`` and ``pos``.

        Returns ``""`` when ``start`` is not before ``pos``.
        """
        if self.start >= self.pos:
            return ""
        return self.string[max(self.start, 0) : self.pos]

    def substring(self, start: int, end: int | None = None) -> str:
        """Return a raw slice of the source string, ignoring the cursor's range."""
        return self.string[start:end]

    def consume(self, match: MatchLike) -> str:
        """Consume the maximal run of matching characters and return it.

        Equivalent to save(), eat_while(match), current().
        """
        self.save()
        self.eat_while(match)
        return self.current()

    def eat_quoted(self, quote: str | int, escape: str | int | None = None) -> bool:
        """Consume the rest of a quoted literal.

        The opening quote must already be consumed. Reads up to and including
        the closing ``quote``; a character after ``escape`` is skipped without
        being interpreted, so escaped quotes and escaped escapes do not end
        the literal.

        All or nothing: if the range ends before the closing quote, ``pos``
        is restored to where it was on entry.

        Args:
            quote: Closing quote character or code
            escape: Escape character or code (defaults to ReaderConfig.escape)

        Returns:
            True if the closing quote was found and consumed.

        Example:
            >>> cursor = Cursor('"a\\\\"b" rest')
            >>> cursor.next()
            '"'
            >>> cursor.eat_quoted('"')
            True
            >>> cursor.current()
            '"a\\\\"b"'
        """
        quote = _as_unit(quote)
        escape = self._config.escape if escape is None else _as_unit(escape)
        start = self.pos

        while self.pos < self.end:
            char = self.next()
            if char == escape:
                # May step past end; the loop condition catches it
                self.pos += 1
            elif char == quote:
                return True

        logger.debug("Unterminated %s-quoted literal at %d", quote, start)
        self.pos = start
        return False

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def error(self, message: str) -> CursorError:
        """Build a CursorError at the current position. Never raises it.

        Args:
            message: Description of what went wrong

        Returns:
            CursorError whose text is ``"<message> at char <pos + 1>"``
            followed by the quoted source (unless disabled in ReaderConfig)
        """
        return CursorError(
            message,
            self.pos,
            self.string,
            include_source=self._config.include_source_in_errors,
        )


def create(string: str, start: int = 0) -> Cursor:
    """Create a cursor over the whole of ``string``, positioned at ``start``."""
    return Cursor(string, start)


def limit(cursor: Cursor, lower: int, upper: int) -> Cursor:
    """Create an independent cursor over ``[lower, upper)`` of ``cursor``'s string."""
    return cursor.limit(lower, upper)


__all__ = ["Cursor", "create", "limit"]
