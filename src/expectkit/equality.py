"""Structural equality with asymmetric pattern support.

``equals`` is the single comparison used by ``to_equal``, the containment
matchers and the collection patterns. Patterns take part through the
:class:`~expectkit.types.AsymmetricMatcher` capability: when exactly one side
is a pattern, its ``matches`` decides. When both sides are patterns neither
one is trusted and the two objects are compared structurally instead.
"""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any
from urllib.parse import ParseResult, SplitResult

import httpx
from pydantic import BaseModel

from expectkit.types import AsymmetricMatcher, is_nullish


def _scalar_kind(value: Any) -> type | None:
    match value:
        case bool():
            return bool
        case int() | float() | complex():
            return float
        case str():
            return str
        case bytes():
            return bytes
        case _:
            return None


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def object_is(a: Any, b: Any) -> bool:
    """Identity for references, value equality for scalars of the same kind.

    NaN is equal to itself and ``0.0`` equals ``-0.0``. Booleans never equal
    numbers.
    """
    if a is b:
        return True

    kind = _scalar_kind(a)
    if kind is None or kind is not _scalar_kind(b):
        return False
    if _is_nan(a) and _is_nan(b):
        return True
    return a == b


def has_key(obj: Any, key: Any) -> bool:
    """Whether ``obj`` exposes ``key`` as a mapping key or attribute."""
    if is_nullish(obj):
        return False
    if isinstance(obj, Mapping):
        return key in obj
    if _scalar_kind(obj) is not None or not isinstance(key, str):
        return False
    return hasattr(obj, key)


def get_key(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj[key]
    return getattr(obj, key)


def is_asymmetric(obj: Any) -> bool:
    """Whether ``obj`` implements the pattern capability."""
    return (
        not isinstance(obj, type)
        and isinstance(obj, AsymmetricMatcher)
        and callable(getattr(type(obj), "matches", None))
    )


def asymmetric_match(a: Any, b: Any) -> bool | None:
    """Let a single pattern operand decide; ``None`` when there is nothing to decide.

    Returns ``None`` both when neither value is a pattern and when both are,
    so the caller falls back to structural comparison.
    """
    asymmetric_a = is_asymmetric(a)
    asymmetric_b = is_asymmetric(b)

    if asymmetric_a and asymmetric_b:
        return None
    if asymmetric_a:
        return bool(a.matches(b))
    if asymmetric_b:
        return bool(b.matches(a))
    return None


def _fields(obj: Any) -> dict[str, Any] | None:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return dict(obj)
    return None


def _has_custom_eq(obj: Any) -> bool:
    return type(obj).__eq__ is not object.__eq__


def _sequence_equals(a: Any, b: Any, strict_check: bool, seen: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    return all(_equals(x, y, strict_check, seen) for x, y in zip(a, b))


def _mapping_equals(a: Mapping, b: Mapping, strict_check: bool, seen: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    for key in a:
        if key not in b:
            return False
        if not _equals(a[key], b[key], strict_check, seen):
            return False
    return True


def _set_equals(a: Any, b: Any, strict_check: bool, seen: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False

    # Elements are paired one-to-one; a pattern may claim only one counterpart.
    left, right = list(a), list(b)
    owners: list[int | None] = [None] * len(right)

    def assign(i: int, visited: set[int]) -> bool:
        for j, candidate in enumerate(right):
            if j in visited or not _equals(left[i], candidate, strict_check, seen):
                continue
            visited.add(j)
            owner = owners[j]
            if owner is None or assign(owner, visited):
                owners[j] = i
                return True
        return False

    return all(assign(i, set()) for i in range(len(left)))


def _structural_equals(a: Any, b: Any, strict_check: bool, seen: set[tuple[int, int]]) -> bool:
    match (a, b):
        case (date(), date()):
            return type(a) is type(b) and a == b
        case (re.Pattern(), re.Pattern()):
            return (a.pattern, a.flags) == (b.pattern, b.flags)
        case (httpx.URL(), httpx.URL()):
            return str(a) == str(b)
        case (ParseResult() | SplitResult(), ParseResult() | SplitResult()):
            return a.geturl() == b.geturl()
        case (list() | tuple(), list() | tuple()):
            return _sequence_equals(a, b, strict_check, seen)
        case (Mapping(), Mapping()):
            return _mapping_equals(a, b, strict_check, seen)
        case (set() | frozenset(), set() | frozenset()):
            return _set_equals(a, b, strict_check, seen)

    if type(a) is not type(b):
        return False

    fields_a = _fields(a)
    if fields_a is not None:
        return _mapping_equals(fields_a, _fields(b) or {}, strict_check, seen)

    if _has_custom_eq(a):
        return bool(a == b)

    if hasattr(a, "__dict__") and hasattr(b, "__dict__"):
        return _mapping_equals(vars(a), vars(b), strict_check, seen)

    return False


def _equals(a: Any, b: Any, strict_check: bool, seen: set[tuple[int, int]]) -> bool:
    if object_is(a, b):
        return True
    if is_nullish(a) or is_nullish(b):
        return False

    if not strict_check:
        result = asymmetric_match(a, b)
        if result is not None:
            return result

    if _scalar_kind(a) is not None or _scalar_kind(b) is not None:
        return False
    if strict_check and type(a) is not type(b):
        return False

    # A pair already being compared further up the stack is assumed equal.
    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)
    try:
        return _structural_equals(a, b, strict_check, seen)
    finally:
        seen.discard(pair)


def equals(a: Any, b: Any, strict_check: bool = False) -> bool:
    """Deep equality between ``a`` and ``b``.

    Parameters
    ----------
    a, b : Any
        Values to compare. Either may be an asymmetric pattern.
    strict_check : bool, default False
        Compare patterns as plain objects instead of letting them match.

    Returns
    -------
    bool
        Whether the values are considered equal.
    """
    return _equals(a, b, strict_check, set())


__all__ = ["asymmetric_match", "equals", "get_key", "has_key", "is_asymmetric", "object_is"]
