"""Identity, equality and truthiness matchers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from expectkit.colors import RECEIVED
from expectkit.equality import equals, is_asymmetric, object_is
from expectkit.handlers import InfoBuilder, handle_diff_failure, handle_failure
from expectkit.registry import register_builtin
from expectkit.serialize import serialize_one_line


if TYPE_CHECKING:
    from expectkit.service import MatcherService


DEEP_EQUALITY_NOTE = 'If it should pass with deep equality, replace "to_be" with "to_equal"'


def _show_received(service: MatcherService) -> InfoBuilder:
    def build(info: list[str]) -> None:
        info.append(f"Received: {RECEIVED(serialize_one_line(service.received))}")

    return build


@register_builtin
def to_be(service: MatcherService, expected: Any) -> None:
    """Identity for objects, value equality for scalars."""
    received = service.received
    if is_asymmetric(expected):
        passed = bool(expected.matches(received))
    else:
        passed = object_is(received, expected)

    note = None
    if not passed and equals(received, expected):
        note = DEEP_EQUALITY_NOTE

    handle_diff_failure(service, passed=passed, expected=expected, note=note, comment="identity")


@register_builtin
def to_equal(service: MatcherService, expected: Any) -> None:
    """Recursive structural equality; patterns inside ``expected`` match."""
    passed = equals(service.received, expected)
    handle_diff_failure(service, passed=passed, expected=expected, comment="deep equality")


@register_builtin
def to_strict_equal(service: MatcherService, expected: Any) -> None:
    """Structural equality that also requires matching container types."""
    passed = equals(service.received, expected, strict_check=True)
    handle_diff_failure(service, passed=passed, expected=expected, comment="deep equality")


@register_builtin
def to_be_none(service: MatcherService) -> None:
    handle_failure(
        service,
        passed=service.received is None,
        expected=None,
        handle_not=_show_received(service),
        handle_info=_show_received(service),
    )


@register_builtin
def to_be_nan(service: MatcherService) -> None:
    received = service.received
    passed = isinstance(received, float) and math.isnan(received)
    handle_failure(
        service,
        passed=passed,
        handle_not=_show_received(service),
        handle_info=_show_received(service),
    )


@register_builtin
def to_be_truthy(service: MatcherService) -> None:
    handle_failure(
        service,
        passed=bool(service.received),
        handle_not=_show_received(service),
        handle_info=_show_received(service),
    )


@register_builtin
def to_be_falsy(service: MatcherService) -> None:
    handle_failure(
        service,
        passed=not service.received,
        handle_not=_show_received(service),
        handle_info=_show_received(service),
    )


__all__ = [
    "DEEP_EQUALITY_NOTE",
    "to_be",
    "to_be_falsy",
    "to_be_nan",
    "to_be_none",
    "to_be_truthy",
    "to_equal",
    "to_strict_equal",
]
