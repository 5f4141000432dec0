"""Exception classes for textcursor.

The cursor itself never raises while scanning. Failed matches are reported
through return values, and diagnostics are built as CursorError *values*
that the caller may raise, log, or collect.

The only exception the cursor raises on its own is CursorBoundsError, and
only when bounds checking is enabled in the active ReaderConfig.
"""

from __future__ import annotations


class TextCursorError(Exception):
    """Base exception for all textcursor errors.

    Subclass this for specific error categories.
    """

    pass


class CursorError(TextCursorError):
    """Diagnostic describing where scanning went wrong.

    Built by Cursor.error() and Cursor.expect(). The cursor returns it;
    raising it is the caller's decision.

    Attributes:
        message: The caller's message, without position information
        pos: Offset of the cursor when the error was built (0-indexed)
        string: The full source string being scanned

    Example:
        >>> err = CursorError("Unexpected character", 3, "ab+c")
        >>> str(err)
        'Unexpected character at char 4 in "ab+c"'
        >>> err.pos
        3
    """

    def __init__(
        self,
        message: str,
        pos: int,
        string: str,
        *,
        include_source: bool = True,
    ) -> None:
        """Initialize error with position and source.

        Args:
            message: Error description
            pos: Cursor offset where the error occurred (0-indexed)
            string: Source string being scanned
            include_source: Append the quoted source to the formatted message
        """
        self.message = message
        self.pos = pos
        self.string = string

        # Positions are reported 1-indexed
        formatted = f"{message} at char {pos + 1}"
        if include_source:
            formatted += f' in "{string}"'

        super().__init__(formatted)

    def __bool__(self) -> bool:
        """A CursorError is always falsy, so results can be tested with `if`."""
        return False


class CursorBoundsError(TextCursorError):
    """Cursor moved outside its allowed range.

    Only raised when ReaderConfig.check_bounds is enabled. With the default
    configuration, out-of-range back_up()/save() calls are not checked.
    """

    def __init__(self, operation: str, offset: int, lower: int, end: int) -> None:
        """Initialize bounds error.

        Args:
            operation: Name of the cursor operation (e.g., "back_up")
            offset: The offending offset
            lower: Lower bound of the cursor
            end: Upper bound of the cursor
        """
        self.operation = operation
        self.offset = offset
        self.lower = lower
        self.end = end
        super().__init__(
            f"{operation}: offset {offset} is outside the range [{lower}, {end}]"
        )
