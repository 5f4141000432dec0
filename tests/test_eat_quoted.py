"""Tests for quoted-literal scanning.

eat_quoted() is called after the opening quote has been consumed and is
all-or-nothing: either the closing quote is consumed, or pos is restored.
"""

from __future__ import annotations

from textcursor import Cursor, ReaderConfig, reader_config_context


class TestEatQuoted:
    """Verify closing-quote detection and rollback."""

    def test_double_then_single_quoted(self) -> None:
        data = "\"foo\"   'bar'"
        cursor = Cursor(data)

        quote = cursor.next()
        assert quote == '"'
        assert cursor.eat_quoted(quote)
        assert cursor.start == 0
        assert cursor.pos == 5
        assert cursor.current() == '"foo"'

        # no double-quoted value ahead
        assert not cursor.eat_quoted(quote)
        assert cursor.pos == 5

        assert cursor.eat_while(" ")
        assert cursor.save() == 8

        quote = cursor.next()
        assert quote == "'"
        assert cursor.eat_quoted(quote)
        assert cursor.pos == 13
        assert cursor.current() == "'bar'"
        assert cursor.eol()

    def test_body_with_closing_quote(self) -> None:
        cursor = Cursor('foo"')
        assert cursor.eat_quoted('"')
        assert cursor.pos == 4

    def test_missing_closing_quote_restores_pos(self) -> None:
        cursor = Cursor('x"foo', 2)
        assert not cursor.eat_quoted('"')
        assert cursor.pos == 2

    def test_escaped_quote_does_not_terminate(self) -> None:
        cursor = Cursor('a\\"b" tail')
        assert cursor.eat_quoted('"')
        assert cursor.pos == 5
        assert cursor.peek() == " "

    def test_escaped_escape(self) -> None:
        cursor = Cursor('a\\\\" tail')
        assert cursor.eat_quoted('"')
        assert cursor.pos == 4

    def test_only_escaped_quotes(self) -> None:
        cursor = Cursor('a\\"b\\"')
        assert not cursor.eat_quoted('"')
        assert cursor.pos == 0

    def test_escape_before_end_of_range(self) -> None:
        cursor = Cursor("abc\\")
        assert not cursor.eat_quoted('"')
        assert cursor.pos == 0

    def test_escape_before_end_of_sub_view(self) -> None:
        view = Cursor('ab\\"c"').limit(0, 3)
        assert not view.eat_quoted('"')
        assert view.pos == 0

    def test_closing_quote_outside_range(self) -> None:
        view = Cursor('foo"').limit(0, 3)
        assert not view.eat_quoted('"')
        assert view.pos == 0

    def test_quote_as_code(self) -> None:
        cursor = Cursor("it's")
        assert cursor.eat_quoted(ord("'"))
        assert cursor.pos == 3

    def test_empty_literal(self) -> None:
        cursor = Cursor('"')
        assert cursor.eat_quoted('"')
        assert cursor.pos == 1

    def test_at_end_of_input(self) -> None:
        cursor = Cursor("ab", 2)
        assert not cursor.eat_quoted('"')
        assert cursor.pos == 2


class TestEscapeCharacter:
    """Verify explicit and configured escape characters."""

    def test_explicit_escape(self) -> None:
        cursor = Cursor('a^"b"')
        assert cursor.eat_quoted('"', escape="^")
        assert cursor.pos == 5

    def test_backslash_is_plain_with_other_escape(self) -> None:
        cursor = Cursor('a\\"b"')
        assert cursor.eat_quoted('"', escape="^")
        assert cursor.pos == 3

    def test_configured_escape(self) -> None:
        with reader_config_context(ReaderConfig(escape="^")):
            cursor = Cursor('a^"b"')
        assert cursor.eat_quoted('"')
        assert cursor.pos == 5
