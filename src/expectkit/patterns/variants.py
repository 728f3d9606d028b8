"""Asymmetric pattern variants and their evaluation.

Every variant is a frozen dataclass holding only its construction-time
configuration. :func:`evaluate` is the one place where matching happens: it
dispatches on the variant and applies ``is_inverse`` once afterwards.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from expectkit.equality import equals, get_key, has_key, is_asymmetric
from expectkit.errors import PatternArgumentError
from expectkit.patterns.kinds import TypeKind, is_kind, kind_of
from expectkit.serialize import serialize_one_line
from expectkit.types import MISSING, is_nullish


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, repr=False)
class Pattern:
    """Base of all asymmetric patterns."""

    is_inverse: bool = field(default=False, kw_only=True)

    def matches(self, received: Any) -> bool:
        return evaluate(self, received)

    @property
    def expected_label(self) -> str:
        return describe(self)

    @property
    def name(self) -> str:
        return type(self).__name__.removesuffix("Pattern")

    def __repr__(self) -> str:
        return self.expected_label


@dataclass(frozen=True, repr=False)
class AnyPattern(Pattern):
    expected: type

    def __post_init__(self) -> None:
        if not isinstance(self.expected, type):
            raise PatternArgumentError(
                "any_() expects to be passed a class. Please pass one or use anything() to match any value."
            )

    @property
    def kind(self) -> TypeKind:
        return kind_of(self.expected)


@dataclass(frozen=True, repr=False)
class AnythingPattern(Pattern):
    pass


@dataclass(frozen=True, repr=False)
class CloseToPattern(Pattern):
    expected: float
    precision: int = 2

    def __post_init__(self) -> None:
        if not _is_number(self.expected):
            raise PatternArgumentError("close_to() expects a number.")
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise PatternArgumentError("close_to() expects an integer precision.")


@dataclass(frozen=True, repr=False)
class ArrayOfPattern(Pattern):
    expected: Any = MISSING

    def __post_init__(self) -> None:
        if self.expected is MISSING:
            raise PatternArgumentError("array_of() expects a matcher or value.")


@dataclass(frozen=True, repr=False)
class ArrayContainingPattern(Pattern):
    expected: list[Any] | tuple[Any, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.expected, (list, tuple)):
            raise PatternArgumentError("array_containing() expects a list or tuple.")


@dataclass(frozen=True, repr=False)
class ObjectContainingPattern(Pattern):
    expected: Mapping[Any, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.expected, Mapping):
            raise PatternArgumentError("object_containing() expects a mapping.")


@dataclass(frozen=True, repr=False)
class StringContainingPattern(Pattern):
    expected: str

    def __post_init__(self) -> None:
        if not isinstance(self.expected, str):
            raise PatternArgumentError("string_containing() expects a string.")


@dataclass(frozen=True, repr=False)
class StringMatchingPattern(Pattern):
    expected: str | re.Pattern[str]

    def __post_init__(self) -> None:
        if not isinstance(self.expected, (str, re.Pattern)):
            raise PatternArgumentError("string_matching() expects a string or compiled regular expression.")


def _match_element(item: Any, expected: Any) -> bool:
    if is_asymmetric(expected):
        return bool(expected.matches(item))
    return equals(item, expected)


def _describe_value(value: Any) -> str:
    if is_asymmetric(value):
        return value.expected_label
    return serialize_one_line(value)


def _evaluate_variant(pattern: Pattern, received: Any) -> bool:
    match pattern:
        case AnyPattern(expected=expected):
            return is_kind(pattern.kind, expected, received)
        case AnythingPattern():
            return not is_nullish(received)
        case CloseToPattern(expected=expected, precision=precision):
            if not _is_number(received):
                return False
            return abs(received - expected) < 10 ** -precision / 2
        case ArrayOfPattern(expected=expected):
            if not isinstance(received, (list, tuple)):
                return False
            return all(_match_element(item, expected) for item in received)
        case ArrayContainingPattern(expected=expected):
            if not isinstance(received, (list, tuple)):
                return False
            return all(any(_match_element(item, wanted) for item in received) for wanted in expected)
        case ObjectContainingPattern(expected=expected):
            if is_nullish(received):
                return False
            return all(
                has_key(received, key) and _match_element(get_key(received, key), value)
                for key, value in expected.items()
            )
        case StringContainingPattern(expected=expected):
            return isinstance(received, str) and expected in received
        case StringMatchingPattern(expected=str() as expected):
            return isinstance(received, str) and expected in received
        case StringMatchingPattern(expected=expected):
            return isinstance(received, str) and expected.search(received) is not None
        case _:
            raise TypeError(f"Unknown pattern variant: {type(pattern).__name__}")


def evaluate(pattern: Pattern, received: Any) -> bool:
    """Decide whether ``received`` satisfies ``pattern``."""
    result = _evaluate_variant(pattern, received)
    return not result if pattern.is_inverse else result


def describe(pattern: Pattern) -> str:
    """Human-readable label of ``pattern`` for diagnostics."""
    match pattern:
        case AnyPattern(expected=expected):
            label = f"Any<{expected.__name__}>"
        case AnythingPattern():
            label = "Anything"
        case CloseToPattern(expected=expected, precision=precision):
            plural = "s" if precision != 1 else ""
            label = f"CloseTo({expected}, {precision} digit{plural})"
        case ArrayOfPattern(expected=str() as expected):
            label = f'ArrayOf( "{expected}" )'
        case ArrayOfPattern(expected=expected):
            label = f"ArrayOf( {_describe_value(expected)} )"
        case ArrayContainingPattern(expected=expected):
            label = f"ArrayContaining({_describe_value(list(expected))})"
        case ObjectContainingPattern(expected=expected):
            label = f"ObjectContaining({_describe_value(dict(expected))})"
        case StringContainingPattern(expected=expected):
            label = f'StringContaining("{expected}")'
        case StringMatchingPattern(expected=str() as expected):
            label = f'StringMatching("{expected}")'
        case StringMatchingPattern(expected=expected):
            label = f"StringMatching(/{expected.pattern}/)"
        case _:
            label = type(pattern).__name__
    return f"Not {label}" if pattern.is_inverse else label


__all__ = [
    "AnyPattern",
    "AnythingPattern",
    "ArrayContainingPattern",
    "ArrayOfPattern",
    "CloseToPattern",
    "ObjectContainingPattern",
    "Pattern",
    "StringContainingPattern",
    "StringMatchingPattern",
    "describe",
    "evaluate",
]
