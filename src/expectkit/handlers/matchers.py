"""Shared type guards and failure reporting for matchers.

A matcher computes ``passed`` and hands it to one of the ``handle_*``
functions. They raise :class:`~expectkit.errors.ExpectError` when the outcome
disagrees with the requested polarity and do nothing otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from expectkit.colors import DIM, EXPECTED, RECEIVED
from expectkit.diff import diff_values
from expectkit.errors import ExpectError, ExpectTypeError
from expectkit.result import AssertionResult
from expectkit.serialize import get_type, serialize_one_line, value_kind
from expectkit.types import MISSING, is_nullish


if TYPE_CHECKING:
    from expectkit.service import MatcherService


InfoBuilder = Callable[[list[str]], None]


def _styled(label: str) -> str:
    return RECEIVED(label) if label == "received" else EXPECTED(label)


def _details(label: str, value: Any, *, with_type: bool = False) -> dict[str, Any]:
    side = "received" if label == "received" else "expected"
    details = {side: value}
    if with_type:
        details[f"{side}_type"] = get_type(value)
    return details


def ensure_type(
    service: MatcherService,
    value: Any,
    types: Sequence[str],
    label: str,
    expected_labels: Sequence[str] = (),
) -> None:
    """Raise ``ExpectTypeError`` unless ``value`` is one of ``types``.

    ``types`` holds value kinds (``"number"``, ``"string"``, ...) or class
    names.
    """
    if value_kind(value) in types or get_type(value) in types:
        return

    raise ExpectTypeError(
        service.assertion_chain,
        message=f"{_styled(label)} value must be a {' or '.join(types)}",
        expected_labels=expected_labels,
        **_details(label, value, with_type=True),
    )


def ensure_not_nullish(
    service: MatcherService,
    value: Any,
    label: str,
    expected_labels: Sequence[str] = (),
) -> None:
    """Raise ``ExpectTypeError`` when ``value`` is ``None`` or ``MISSING``."""
    if not is_nullish(value):
        return

    raise ExpectTypeError(
        service.assertion_chain,
        message=f"{_styled(label)} value must not be None nor MISSING",
        expected_labels=expected_labels,
        **_details(label, value),
    )


def handle_failure(
    service: MatcherService,
    *,
    passed: bool,
    expected: Any = MISSING,
    received: Any = MISSING,
    expected_labels: Sequence[str] = (),
    comment: str | None = None,
    handle_not: InfoBuilder | None = None,
    handle_info: InfoBuilder | None = None,
) -> None:
    """Raise ``ExpectError`` when ``passed`` contradicts the chain's polarity."""
    if passed != service.not_modifier:
        return

    if received is MISSING:
        received = service.received

    assertion = AssertionResult(
        name=service.matcher_name,
        passed=passed,
        expected=None if expected is MISSING else expected,
        received=received,
    )

    info: list[str] = []
    builder = handle_not if service.not_modifier else handle_info
    if builder is not None:
        builder(info)

    raise ExpectError(
        service.assertion_chain,
        info=info,
        assertion=assertion,
        expected_labels=expected_labels,
        comment=comment,
    )


def handle_diff_failure(
    service: MatcherService,
    *,
    passed: bool,
    expected: Any,
    received: Any = MISSING,
    note: str | None = None,
    expected_labels: Sequence[str] = ("expected",),
    comment: str | None = None,
) -> None:
    """Like :func:`handle_failure`, explaining the mismatch with a diff."""
    actual = service.received if received is MISSING else received

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected: not {EXPECTED(serialize_one_line(expected))}")
        if not _same_rendering(expected, actual):
            info.append(f"Received:     {RECEIVED(serialize_one_line(actual))}")

    def handle_info(info: list[str]) -> None:
        if note:
            info.extend([DIM(note), ""])
        info.append(diff_values(expected, actual))

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        received=actual,
        expected_labels=expected_labels,
        comment=comment,
        handle_not=handle_not,
        handle_info=handle_info,
    )


def _same_rendering(expected: Any, received: Any) -> bool:
    return serialize_one_line(expected) == serialize_one_line(received)


def handle_comparison_failure(
    service: MatcherService,
    operator: str,
    *,
    passed: bool,
    expected: Any,
    received: Any = MISSING,
    expected_labels: Sequence[str] = ("expected",),
    comment: str | None = None,
) -> None:
    """Report a failed relational comparison such as ``>`` or ``<=``."""
    actual = service.received if received is MISSING else received
    padding = " " * len(operator)

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected: not {operator} {EXPECTED(serialize_one_line(expected))}")
        info.append(f"Received:     {padding} {RECEIVED(serialize_one_line(actual))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected: {operator} {EXPECTED(serialize_one_line(expected))}")
        info.append(f"Received: {padding} {RECEIVED(serialize_one_line(actual))}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        received=actual,
        expected_labels=expected_labels,
        comment=comment,
        handle_not=handle_not,
        handle_info=handle_info,
    )


__all__ = [
    "InfoBuilder",
    "ensure_not_nullish",
    "ensure_type",
    "handle_comparison_failure",
    "handle_diff_failure",
    "handle_failure",
]
