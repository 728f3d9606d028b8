"""The ``to_raise`` matcher."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.equality import is_asymmetric
from expectkit.errors import ExpectTypeError
from expectkit.handlers import ensure_type, handle_failure
from expectkit.registry import register_builtin
from expectkit.serialize import get_type, serialize_error, serialize_one_line
from expectkit.types import MISSING


if TYPE_CHECKING:
    from expectkit.service import MatcherService


@dataclass(frozen=True, slots=True)
class Thrown:
    """Something raised by the received callable, or the rejection of an awaitable."""

    value: Any

    @property
    def is_error(self) -> bool:
        return isinstance(self.value, BaseException)

    @property
    def message(self) -> str:
        return str(self.value) if self.is_error else serialize_one_line(self.value)

    @property
    def name(self) -> str:
        return type(self.value).__name__


def capture_raised(service: MatcherService) -> Thrown | None:
    """Call the received function and capture what it raises.

    Under ``resolves``/``rejects`` the awaited value is taken as the raised one.
    """
    if service.resolves_modifier or service.rejects_modifier:
        return Thrown(service.received)

    ensure_type(service, service.received, ["function"], "received", ["expected"])
    try:
        service.received()
    except Exception as exc:
        return Thrown(exc)
    return None


def _did_not_raise(info: list[str]) -> None:
    info.append(f"{RECEIVED('Received')} function did not raise")


def _thrown_lines(thrown: Thrown) -> list[str]:
    lines = []
    if thrown.is_error:
        lines.append(f"Received name:    {RECEIVED(thrown.name)}")
        lines.append(f"Received message: {RECEIVED(serialize_one_line(thrown.message))}")
    else:
        lines.append(f"Received value:   {RECEIVED(serialize_one_line(thrown.value))}")
    return lines


def _describe_expected(expected: Any) -> tuple[str, str]:
    match expected:
        case type():
            return "class", expected.__name__
        case str():
            return "substring", serialize_one_line(expected)
        case re.Pattern():
            return "pattern", f"/{expected.pattern}/"
        case BaseException():
            return "message", serialize_one_line(str(expected))
        case _:
            return "pattern", expected.expected_label


def _expected_passes(expected: Any, thrown: Thrown) -> bool:
    match expected:
        case type():
            return isinstance(thrown.value, expected)
        case str():
            return expected in thrown.message
        case re.Pattern():
            return expected.search(thrown.message) is not None
        case BaseException():
            return thrown.message == str(expected)
        case _:
            return bool(expected.matches(thrown.value))


@register_builtin
def to_raise(service: MatcherService, expected: Any = MISSING) -> None:
    """Check that calling the received function raises.

    ``expected`` narrows what must be raised: an exception class, a message
    substring, a compiled regular expression, a pattern, or an exception
    instance whose message must match exactly.
    """
    labels = [] if expected is MISSING else ["expected"]
    valid = (
        expected is MISSING
        or isinstance(expected, (type, str, re.Pattern, BaseException))
        or is_asymmetric(expected)
    )
    if not valid:
        raise ExpectTypeError(
            service.assertion_chain,
            message=f"{EXPECTED('expected')} value must be a string, regular expression, class, exception or pattern",
            expected=expected,
            expected_type=get_type(expected),
            expected_labels=labels,
        )

    thrown = capture_raised(service)
    received = serialize_error(thrown.value) if thrown else None

    if expected is MISSING:
        passed = thrown is not None

        def handle_not(info: list[str]) -> None:
            info.extend(_thrown_lines(thrown))

        handle_failure(
            service,
            passed=passed,
            received=received,
            expected_labels=labels,
            handle_not=handle_not,
            handle_info=_did_not_raise,
        )
        return

    kind, shown = _describe_expected(expected)
    passed = thrown is not None and _expected_passes(expected, thrown)

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected {kind}: not {EXPECTED(shown)}")
        if thrown is not None:
            info.extend(_thrown_lines(thrown))

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected {kind}: {EXPECTED(shown)}")
        if thrown is None:
            info.append("")
            _did_not_raise(info)
            return
        info.extend(_thrown_lines(thrown))

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        received=received,
        expected_labels=labels,
        handle_not=handle_not,
        handle_info=handle_info,
    )


__all__ = ["Thrown", "capture_raised", "to_raise"]
