"""Helpers for the ``unittest.mock`` call matchers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any
from unittest.mock import NonCallableMock

from expectkit.colors import DIM, RECEIVED
from expectkit.equality import equals
from expectkit.errors import ExpectTypeError
from expectkit.serialize import get_type, serialize_one_line


if TYPE_CHECKING:
    from expectkit.service import MatcherService


MAX_SHOWN_CALLS = 3


def ensure_mock(service: MatcherService, expected_labels: Sequence[str] = ()) -> NonCallableMock:
    """Return the received mock or raise ``ExpectTypeError``."""
    received = service.received
    if isinstance(received, NonCallableMock):
        return received

    raise ExpectTypeError(
        service.assertion_chain,
        message=f"{RECEIVED('received')} value must be a mock",
        received=received,
        received_type=get_type(received),
        expected_labels=expected_labels,
    )


def call_matches(call: Any, args: Sequence[Any], kwargs: Mapping[str, Any]) -> bool:
    """Whether a recorded call was made with ``args`` and ``kwargs``."""
    return equals(list(call.args), list(args)) and equals(dict(call.kwargs), dict(kwargs))


def format_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = [serialize_one_line(arg) for arg in args]
    parts.extend(f"{key}={serialize_one_line(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def format_recorded_calls(mock: NonCallableMock, *, last: int = MAX_SHOWN_CALLS) -> list[str]:
    """Render the most recent calls of ``mock``, numbered from one."""
    calls = mock.call_args_list
    if not calls:
        return [f"Number of calls: {RECEIVED('0')}"]

    lines = ["Received calls:"]
    start = max(0, len(calls) - last)
    if start:
        lines.append(DIM(f"  ... {start} earlier call(s)"))
    for index, call in enumerate(calls[start:], start=start + 1):
        lines.append(f"  {index}: {RECEIVED(format_call(call.args, call.kwargs))}")
    lines.append("")
    lines.append(f"Number of calls: {RECEIVED(str(len(calls)))}")
    return lines


__all__ = ["MAX_SHOWN_CALLS", "call_matches", "ensure_mock", "format_call", "format_recorded_calls"]
