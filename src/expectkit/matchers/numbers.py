"""Numeric matchers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.handlers import ensure_positive_number, ensure_type, handle_failure, handle_numeric_comparison
from expectkit.registry import register_builtin
from expectkit.serialize import serialize_one_line


if TYPE_CHECKING:
    from expectkit.service import MatcherService


def _format_threshold(threshold: float, precision: int) -> str:
    if precision < 20:
        return f"{threshold:.{precision + 1}f}"
    return repr(threshold)


@register_builtin
def to_be_close_to(service: MatcherService, expected: Any, precision: int = 2) -> None:
    """Pass when ``|received - expected| < 10 ** -precision / 2``.

    Two infinities of the same sign are close; any other infinity is not.
    """
    labels = ["expected", "precision"]
    ensure_type(service, service.received, ["number"], "received", labels)
    ensure_type(service, expected, ["number"], "expected", labels)
    ensure_positive_number(service, precision, "precision", labels)

    received = service.received
    threshold = 10**-precision / 2
    if math.isinf(received) and math.isinf(expected):
        passed = received == expected
        difference = 0.0 if passed else math.inf
    else:
        difference = abs(received - expected)
        passed = difference < threshold

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected: not {EXPECTED(serialize_one_line(expected))}")
        if difference != 0:
            info.append(f"Received:     {RECEIVED(serialize_one_line(received))}")
        info.append("")
        info.append(f"Expected precision:    {EXPECTED(str(precision))}")
        info.append(f"Expected difference: >= {EXPECTED(_format_threshold(threshold, precision))}")
        info.append(f"Received difference:    {RECEIVED(serialize_one_line(difference))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected: {EXPECTED(serialize_one_line(expected))}")
        info.append(f"Received: {RECEIVED(serialize_one_line(received))}")
        info.append("")
        info.append(f"Expected precision:    {EXPECTED(str(precision))}")
        info.append(f"Expected difference: < {EXPECTED(_format_threshold(threshold, precision))}")
        info.append(f"Received difference:   {RECEIVED(serialize_one_line(difference))}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        expected_labels=labels,
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_be_greater_than(service: MatcherService, expected: Any) -> None:
    handle_numeric_comparison(service, expected, ">")


@register_builtin
def to_be_greater_than_or_equal(service: MatcherService, expected: Any) -> None:
    handle_numeric_comparison(service, expected, ">=")


@register_builtin
def to_be_less_than(service: MatcherService, expected: Any) -> None:
    handle_numeric_comparison(service, expected, "<")


@register_builtin
def to_be_less_than_or_equal(service: MatcherService, expected: Any) -> None:
    handle_numeric_comparison(service, expected, "<=")


__all__ = [
    "to_be_close_to",
    "to_be_greater_than",
    "to_be_greater_than_or_equal",
    "to_be_less_than",
    "to_be_less_than_or_equal",
]
