"""Length and string pattern matchers."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.errors import ExpectTypeError
from expectkit.handlers import ensure_not_nullish, ensure_positive_number, ensure_type, handle_failure
from expectkit.registry import register_builtin
from expectkit.serialize import get_type, serialize_one_line


if TYPE_CHECKING:
    from expectkit.service import MatcherService


@register_builtin
def to_have_length(service: MatcherService, expected: Any) -> None:
    """Compare ``len(received)`` with ``expected``."""
    received = service.received
    ensure_not_nullish(service, received, "received", ["expected"])
    if not hasattr(received, "__len__"):
        raise ExpectTypeError(
            service.assertion_chain,
            message=f"{RECEIVED('received')} value must support len()",
            received=received,
            received_type=get_type(received),
            expected_labels=["expected"],
        )
    ensure_positive_number(service, expected, "expected", ["expected"])

    length = len(received)
    passed = length == expected

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected length: not {EXPECTED(str(expected))}")
        info.append(f"Received value:      {RECEIVED(serialize_one_line(received))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected length: {EXPECTED(str(expected))}")
        info.append(f"Received length: {RECEIVED(str(length))}")
        info.append(f"Received value:  {RECEIVED(serialize_one_line(received))}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        expected_labels=["expected"],
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_match(service: MatcherService, expected: str | re.Pattern[str]) -> None:
    """Substring containment for a string, ``search`` for a compiled pattern."""
    received = service.received
    ensure_type(service, received, ["string"], "received", ["expected"])
    ensure_type(service, expected, ["string", "Pattern"], "expected", ["expected"])

    if isinstance(expected, str):
        passed = expected in received
        label = "substring"
        shown = serialize_one_line(expected)
    else:
        passed = expected.search(received) is not None
        label = "pattern"
        shown = f"/{expected.pattern}/"

    expected_prefix = f"Expected {label}: "
    received_prefix = "Received string: "

    def handle_not(info: list[str]) -> None:
        info.append(f"{expected_prefix}not {EXPECTED(shown)}")
        info.append(f"{received_prefix.ljust(len(expected_prefix) + 4)}{RECEIVED(serialize_one_line(received))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"{expected_prefix}{EXPECTED(shown)}")
        info.append(f"{received_prefix.ljust(len(expected_prefix))}{RECEIVED(serialize_one_line(received))}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        expected_labels=["expected"],
        handle_not=handle_not,
        handle_info=handle_info,
    )


__all__ = ["to_have_length", "to_match"]
