"""Tests for match-spec variants and coercion."""

from __future__ import annotations

import re

import pytest

from textcursor.matchers import (
    ExactChar,
    ExactCode,
    Pattern,
    Predicate,
    as_matcher,
)


class TestVariants:
    """Each variant tests exactly one character."""

    def test_exact_code(self) -> None:
        matcher = ExactCode(ord("a"))
        assert matcher.test("a")
        assert not matcher.test("b")

    def test_exact_code_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            ExactCode(-1)

    def test_exact_char_uses_first_character(self) -> None:
        matcher = ExactChar("ab")
        assert matcher.test("a")
        assert not matcher.test("b")

    def test_exact_char_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            ExactChar("")

    def test_predicate(self) -> None:
        matcher = Predicate(str.isupper)
        assert matcher.test("Q")
        assert not matcher.test("q")

    def test_predicate_by_code(self) -> None:
        matcher = Predicate(lambda code: code > 127, by_code=True)
        assert matcher.test("é")
        assert not matcher.test("e")

    def test_predicate_truthiness(self) -> None:
        matcher = Predicate(lambda char: "abc".find(char) + 1)
        assert matcher.test("b")
        assert not matcher.test("z")

    def test_pattern(self) -> None:
        matcher = Pattern(re.compile(r"[0-9a-f]"))
        assert matcher.test("c")
        assert not matcher.test("g")

    def test_frozen(self) -> None:
        matcher = ExactChar("a")
        with pytest.raises(AttributeError):
            matcher.char = "b"  # type: ignore[misc]


class TestAsMatcher:
    """Raw values coerce to the matching variant."""

    def test_passthrough(self) -> None:
        matcher = ExactChar("x")
        assert as_matcher(matcher) is matcher

    def test_int(self) -> None:
        assert as_matcher(120) == ExactCode(120)

    def test_str(self) -> None:
        assert as_matcher("x") == ExactChar("x")

    def test_regex(self) -> None:
        pattern = re.compile(r"\d")
        assert as_matcher(pattern) == Pattern(pattern)

    def test_object_with_match_method(self) -> None:
        class Vowels:
            def match(self, string: str) -> bool | None:
                return True if string in "aeiou" else None

        matcher = as_matcher(Vowels())
        assert isinstance(matcher, Pattern)
        assert matcher.test("e")
        assert not matcher.test("x")

    def test_object_with_test_method(self) -> None:
        class Vowel:
            def test(self, char: str) -> bool:
                return char in "aeiou"

        matcher = as_matcher(Vowel())
        assert isinstance(matcher, Pattern)
        assert matcher.test("a")
        assert not matcher.test("b")

    def test_test_method_is_preferred_over_match(self) -> None:
        class Digits:
            def test(self, char: str) -> bool:
                return char.isdigit()

            def match(self, string: str) -> None:
                raise AssertionError("match() must not be called")

        assert as_matcher(Digits()).test("4")

    def test_callable_object_is_predicate(self) -> None:
        class Upper:
            def __call__(self, char: str) -> bool:
                return char.isupper()

            def test(self, char: str) -> bool:
                raise AssertionError("test() must not be called")

        matcher = as_matcher(Upper())
        assert isinstance(matcher, Predicate)
        assert matcher.test("Q")

    def test_set(self) -> None:
        matcher = as_matcher(frozenset("+-"))
        assert isinstance(matcher, Predicate)
        assert matcher.test("+")
        assert not matcher.test("*")

    def test_callable(self) -> None:
        matcher = as_matcher(str.isspace)
        assert matcher == Predicate(str.isspace)

    def test_bool_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_matcher(True)

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError, match="unsupported match spec"):
            as_matcher(None)
