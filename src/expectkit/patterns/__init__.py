"""Asymmetric patterns: reusable "matches anything satisfying X" values."""

from .factory import (
    PatternFactory,
    any_,
    anything,
    array_containing,
    array_of,
    close_to,
    not_,
    object_containing,
    patterns,
    string_containing,
    string_matching,
)
from .kinds import TypeKind
from .variants import (
    AnyPattern,
    AnythingPattern,
    ArrayContainingPattern,
    ArrayOfPattern,
    CloseToPattern,
    ObjectContainingPattern,
    Pattern,
    StringContainingPattern,
    StringMatchingPattern,
    describe,
    evaluate,
)

__all__ = [
    # Variants
    "Pattern",
    "AnyPattern",
    "AnythingPattern",
    "ArrayContainingPattern",
    "ArrayOfPattern",
    "CloseToPattern",
    "ObjectContainingPattern",
    "StringContainingPattern",
    "StringMatchingPattern",
    "TypeKind",
    "describe",
    "evaluate",
    # Factories
    "PatternFactory",
    "patterns",
    "any_",
    "anything",
    "array_containing",
    "array_of",
    "close_to",
    "not_",
    "object_containing",
    "string_containing",
    "string_matching",
]
