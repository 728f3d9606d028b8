"""Matchers for ``unittest.mock`` call records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.errors import ExpectTypeError
from expectkit.handlers import (
    call_matches,
    ensure_mock,
    ensure_positive_number,
    format_call,
    format_recorded_calls,
    handle_failure,
)
from expectkit.registry import register_builtin
from expectkit.serialize import get_type


if TYPE_CHECKING:
    from expectkit.service import MatcherService


@register_builtin
def to_have_been_called(service: MatcherService) -> None:
    mock = ensure_mock(service)
    count = mock.call_count

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected number of calls: {EXPECTED('0')}")
        info.append("")
        info.extend(format_recorded_calls(mock))

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected number of calls: >= {EXPECTED('1')}")
        info.append(f"Received number of calls:    {RECEIVED(str(count))}")

    handle_failure(
        service,
        passed=count > 0,
        received=count,
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_have_been_called_times(service: MatcherService, expected: int) -> None:
    mock = ensure_mock(service, ["expected"])
    ensure_positive_number(service, expected, "expected", ["expected"])
    count = mock.call_count

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected number of calls: not {EXPECTED(str(expected))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected number of calls: {EXPECTED(str(expected))}")
        info.append(f"Received number of calls: {RECEIVED(str(count))}")

    handle_failure(
        service,
        passed=count == expected,
        expected=expected,
        received=count,
        expected_labels=["expected"],
        handle_not=handle_not,
        handle_info=handle_info,
    )


def _report_call(
    service: MatcherService,
    *,
    passed: bool,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    labels: list[str],
) -> None:
    mock = service.received
    shown = format_call(args, kwargs)

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected: not {EXPECTED(shown)}")
        info.append("")
        info.extend(format_recorded_calls(mock))

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected: {EXPECTED(shown)}")
        info.append("")
        info.extend(format_recorded_calls(mock))

    handle_failure(
        service,
        passed=passed,
        expected={"args": list(args), "kwargs": kwargs},
        received=[{"args": list(call.args), "kwargs": dict(call.kwargs)} for call in mock.call_args_list],
        expected_labels=labels,
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_have_been_called_with(service: MatcherService, *args: Any, **kwargs: Any) -> None:
    """Pass when any recorded call deep-equals ``args`` and ``kwargs``."""
    mock = ensure_mock(service, ["...expected"])
    passed = any(call_matches(call, args, kwargs) for call in mock.call_args_list)
    _report_call(service, passed=passed, args=args, kwargs=kwargs, labels=["...expected"])


@register_builtin
def to_have_been_last_called_with(service: MatcherService, *args: Any, **kwargs: Any) -> None:
    mock = ensure_mock(service, ["...expected"])
    calls = mock.call_args_list
    passed = bool(calls) and call_matches(calls[-1], args, kwargs)
    _report_call(service, passed=passed, args=args, kwargs=kwargs, labels=["...expected"])


@register_builtin
def to_have_been_nth_called_with(service: MatcherService, nth: int, *args: Any, **kwargs: Any) -> None:
    """Check the ``nth`` recorded call, counting from one."""
    labels = ["n", "...expected"]
    mock = ensure_mock(service, labels)
    ensure_positive_number(service, nth, "n", labels)
    if nth == 0:
        raise ExpectTypeError(
            service.assertion_chain,
            message=f"{EXPECTED('n')} value must be a positive integer",
            expected=nth,
            expected_type=get_type(nth),
            expected_labels=labels,
        )

    calls = mock.call_args_list
    passed = len(calls) >= nth and call_matches(calls[nth - 1], args, kwargs)
    _report_call(service, passed=passed, args=args, kwargs=kwargs, labels=labels)


__all__ = [
    "to_have_been_called",
    "to_have_been_called_times",
    "to_have_been_called_with",
    "to_have_been_last_called_with",
    "to_have_been_nth_called_with",
]
