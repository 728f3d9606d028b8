"""Factories for asymmetric patterns.

``patterns`` builds regular patterns and ``patterns.not_`` builds inverted
ones::

    expect(value).to_equal({"id": patterns.any(int)})
    expect(value).to_equal(patterns.not_.string_containing("error"))
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from expectkit.patterns.variants import (
    AnyPattern,
    AnythingPattern,
    ArrayContainingPattern,
    ArrayOfPattern,
    CloseToPattern,
    ObjectContainingPattern,
    StringContainingPattern,
    StringMatchingPattern,
)
from expectkit.types import MISSING


class PatternFactory:
    """Namespace of pattern constructors sharing one polarity."""

    def __init__(self, inverse: bool = False) -> None:
        self._inverse = inverse

    @property
    def not_(self) -> PatternFactory:
        return PatternFactory(inverse=not self._inverse)

    def any(self, expected: type = MISSING) -> AnyPattern:
        return AnyPattern(expected, is_inverse=self._inverse)

    def anything(self) -> AnythingPattern:
        return AnythingPattern(is_inverse=self._inverse)

    def close_to(self, expected: float, precision: int = 2) -> CloseToPattern:
        return CloseToPattern(expected, precision, is_inverse=self._inverse)

    def array_of(self, expected: Any = MISSING) -> ArrayOfPattern:
        return ArrayOfPattern(expected, is_inverse=self._inverse)

    def array_containing(self, expected: Sequence[Any]) -> ArrayContainingPattern:
        return ArrayContainingPattern(expected, is_inverse=self._inverse)

    def object_containing(self, expected: Mapping[Any, Any]) -> ObjectContainingPattern:
        return ObjectContainingPattern(expected, is_inverse=self._inverse)

    def string_containing(self, expected: str) -> StringContainingPattern:
        return StringContainingPattern(expected, is_inverse=self._inverse)

    def string_matching(self, expected: str | re.Pattern[str]) -> StringMatchingPattern:
        return StringMatchingPattern(expected, is_inverse=self._inverse)


patterns = PatternFactory()

any_ = patterns.any
anything = patterns.anything
close_to = patterns.close_to
array_of = patterns.array_of
array_containing = patterns.array_containing
object_containing = patterns.object_containing
string_containing = patterns.string_containing
string_matching = patterns.string_matching
not_ = patterns.not_


__all__ = [
    "PatternFactory",
    "any_",
    "anything",
    "array_containing",
    "array_of",
    "close_to",
    "not_",
    "object_containing",
    "patterns",
    "string_containing",
    "string_matching",
]
