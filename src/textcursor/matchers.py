"""Match specifications for predicate-consuming cursor operations.

A match spec decides whether a single character of lookahead "matches".
Four variants cover every form accepted by Cursor.eat() and friends:

- ExactCode: equal to a character code (``ExactCode(ord("a"))``)
- ExactChar: equal to a character (``ExactChar("a")``)
- Predicate: a callable returning a truthy value
- Pattern: an object with a ``test`` method, or a compiled regex (or any
  object with a ``match`` method)

Raw values are coerced with as_matcher(), so callers can keep writing
``cursor.eat("a")``, ``cursor.eat(97)``, ``cursor.eat(str.isdigit)`` or
``cursor.eat(re.compile(r"\\w"))``.

Every variant exposes ``test(char)``. The cursor never calls ``test`` at
end-of-range, so the empty end sentinel can never match.

Thread Safety:
All variants are frozen dataclasses and safe to share across threads.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsMatch(Protocol):
    """Anything with a regex-style ``match`` method (e.g., re.Pattern)."""

    def match(self, string: str, /) -> Any: ...


@runtime_checkable
class SupportsTest(Protocol):
    """Anything asked directly whether one character matches."""

    def test(self, char: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class ExactCode:
    """Match a single character by its code.

    Attributes:
        code: Character code (``ord`` value) to compare against

    Example:
        >>> ExactCode(ord("a")).test("a")
        True
    """

    code: int

    def __post_init__(self) -> None:
        if self.code < 0:
            raise ValueError(f"character codes are never negative, got {self.code}")

    def test(self, char: str) -> bool:
        return ord(char) == self.code


@dataclass(frozen=True, slots=True)
class ExactChar:
    """Match a single character by equality.

    Only the first character of ``char`` is significant, so ``ExactChar("ab")``
    behaves like ``ExactChar("a")``.

    Attributes:
        char: Non-empty string whose first character is compared
    """

    char: str

    def __post_init__(self) -> None:
        if not self.char:
            raise ValueError("ExactChar requires a non-empty string")

    def test(self, char: str) -> bool:
        return char == self.char[0]


@dataclass(frozen=True, slots=True)
class Predicate:
    """Match when a callable returns a truthy value.

    Attributes:
        func: Called with the lookahead character (or its code)
        by_code: Pass ``ord(char)`` instead of the character

    Example:
        >>> Predicate(str.isdigit).test("7")
        True
        >>> Predicate(lambda c: c > 127, by_code=True).test("é")
        True
    """

    func: Callable[[Any], object]
    by_code: bool = False

    def test(self, char: str) -> bool:
        if self.by_code:
            return bool(self.func(ord(char)))
        return bool(self.func(char))


@dataclass(frozen=True, slots=True)
class Pattern:
    """Match when a pattern object accepts the single lookahead character.

    Objects with a ``test`` method are asked directly; otherwise a
    non-None result from ``match`` counts as a match.

    Attributes:
        pattern: Object with ``test``, compiled regex, or any object with
            a ``match`` method

    Example:
        >>> Pattern(re.compile(r"[a-z]")).test("q")
        True
    """

    pattern: SupportsTest | SupportsMatch

    def test(self, char: str) -> bool:
        test = getattr(self.pattern, "test", None)
        if callable(test):
            return bool(test(char))
        return self.pattern.match(char) is not None


MatchSpec = ExactCode | ExactChar | Predicate | Pattern

# Everything as_matcher() accepts
MatchLike = (
    MatchSpec
    | int
    | str
    | SupportsTest
    | SupportsMatch
    | frozenset[str]
    | set[str]
    | Callable[[Any], object]
)


def as_matcher(spec: object) -> MatchSpec:
    """Coerce a raw value into a MatchSpec variant.

    Args:
        spec: A MatchSpec, int code, str, set/frozenset of characters,
            callable, or pattern object (with ``test`` or ``match``).
            Callables are checked first, so a callable object becomes a
            Predicate even when it also has ``test`` or ``match``.

    Returns:
        The corresponding MatchSpec variant (MatchSpec values pass through)

    Raises:
        TypeError: If ``spec`` has no supported form
        ValueError: If ``spec`` is an empty string or a negative code

    Example:
        >>> as_matcher("x")
        ExactChar(char='x')
        >>> as_matcher(120)
        ExactCode(code=120)
    """
    if isinstance(spec, ExactCode | ExactChar | Predicate | Pattern):
        return spec
    # bool is an int subclass, but eat(True) is always a caller mistake
    if isinstance(spec, int) and not isinstance(spec, bool):
        return ExactCode(spec)
    if isinstance(spec, str):
        return ExactChar(spec)
    if isinstance(spec, re.Pattern):
        return Pattern(spec)
    if isinstance(spec, frozenset | set):
        return Predicate(spec.__contains__)
    if callable(spec):
        return Predicate(spec)
    # Duck-typed pattern objects, checked by attribute
    if callable(getattr(spec, "test", None)) or callable(getattr(spec, "match", None)):
        return Pattern(spec)
    raise TypeError(f"unsupported match spec: {spec!r}")


__all__ = [
    "ExactChar",
    "ExactCode",
    "MatchLike",
    "MatchSpec",
    "Pattern",
    "Predicate",
    "SupportsMatch",
    "SupportsTest",
    "as_matcher",
]
