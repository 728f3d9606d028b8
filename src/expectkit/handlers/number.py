"""Numeric guards and comparisons shared by the number matchers."""

from __future__ import annotations

import operator as op
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED
from expectkit.errors import ExpectTypeError
from expectkit.handlers.matchers import ensure_type, handle_comparison_failure
from expectkit.serialize import get_type


if TYPE_CHECKING:
    from expectkit.service import MatcherService


COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    ">": op.gt,
    ">=": op.ge,
    "<": op.lt,
    "<=": op.le,
}


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def ensure_positive_number(
    service: MatcherService,
    value: Any,
    label: str,
    expected_labels: Sequence[str] = (),
) -> None:
    """Raise ``ExpectTypeError`` unless ``value`` is a non-negative integer."""
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return

    raise ExpectTypeError(
        service.assertion_chain,
        message=f"{EXPECTED(label)} value must be a non-negative integer",
        expected=value,
        expected_type=get_type(value),
        expected_labels=expected_labels,
    )


def handle_numeric_comparison(service: MatcherService, expected: Any, operator: str) -> None:
    """Check ``received <operator> expected`` for two numbers."""
    ensure_type(service, service.received, ["number"], "received", ["expected"])
    ensure_type(service, expected, ["number"], "expected", ["expected"])

    passed = COMPARISONS[operator](service.received, expected)
    handle_comparison_failure(service, operator, passed=passed, expected=expected)


__all__ = ["COMPARISONS", "ensure_positive_number", "handle_numeric_comparison", "is_number"]
