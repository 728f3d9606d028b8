"""Error types raised by expectations.

``ExpectError`` and ``ExpectPromiseError`` are ``AssertionError`` subclasses so
test runners report them as ordinary failures. ``ExpectTypeError`` and
``ExpectConfigError`` signal misuse of a matcher or of the chain itself.
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from typing import Any

from pydantic_core import to_jsonable_python

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.format import compose_statement
from expectkit.result import AssertionResult
from expectkit.serialize import serialize, serialize_one_line
from expectkit.types import MISSING, PromiseKind


def _is_empty(value: Any) -> bool:
    if value is None or value is MISSING:
        return True
    return isinstance(value, (str, list, tuple, dict, set)) and not value


class ExpectBaseError(Exception):
    """Base for every expectkit error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def stack(self) -> str | None:
        """Formatted traceback, available once the error has been raised."""
        if self.__traceback__ is None:
            return None
        return "".join(traceback.format_exception(self))

    def to_json(self) -> dict[str, Any]:
        """JSON-serializable snapshot of the error's own non-empty fields."""
        json: dict[str, Any] = {}
        for key, value in vars(self).items():
            if key.startswith("_") or _is_empty(value):
                continue
            json[key] = to_jsonable_python(value, fallback=repr)

        json["name"] = self.name
        json["message"] = self.message
        json["stack"] = self.stack
        return json


class ExpectConfigError(ExpectBaseError, ValueError):
    """Raised when an expectation chain is assembled incorrectly."""


class PatternArgumentError(ExpectConfigError, TypeError):
    """Raised when a pattern is constructed with missing or malformed arguments."""


class ExpectError(ExpectBaseError, AssertionError):
    """Raised when a matcher's outcome disagrees with the requested polarity."""

    def __init__(
        self,
        assertion_chain: Sequence[str],
        *,
        info: Sequence[str] = (),
        assertion: AssertionResult | None = None,
        expected_labels: Sequence[str] = (),
        received_label: str = "received",
        comment: str | None = None,
    ) -> None:
        statement = compose_statement(assertion_chain, expected_labels, received_label, comment)
        super().__init__("\n".join([f"{statement}\n", *info]))

        self.matcher_result = assertion
        if assertion is not None:
            assertion.message = self.message


class ExpectTypeError(ExpectBaseError, TypeError):
    """Raised when a matcher receives a value of the wrong type."""

    def __init__(
        self,
        assertion_chain: Sequence[str],
        *,
        message: str,
        expected: Any = MISSING,
        expected_type: str | None = None,
        received: Any = MISSING,
        received_type: str | None = None,
        expected_labels: Sequence[str] = (),
    ) -> None:
        lines = [
            f"{compose_statement(assertion_chain, expected_labels)}\n",
            f"Matcher error: {message}\n",
        ]

        if expected is not MISSING:
            if expected_type:
                lines.append(f"Expected has type:  {expected_type}")
            lines.append("Expected has value: " + EXPECTED("\n".join(serialize(expected))))

        if received is not MISSING:
            if received_type:
                lines.append(f"Received has type:  {received_type}")
            lines.append("Received has value: " + RECEIVED("\n".join(serialize(received))))

        super().__init__("\n".join(lines))


class ExpectPromiseError(ExpectBaseError, AssertionError):
    """Raised when an awaited value settles the opposite way to the one expected."""

    def __init__(
        self,
        assertion_chain: Sequence[str],
        *,
        message: str,
        received: Any,
        promise_kind: PromiseKind,
    ) -> None:
        lines = [
            f"{compose_statement(assertion_chain)}\n",
            f"Matcher error: {message}",
            f"{promise_kind.value} to value: {RECEIVED(serialize_one_line(received))}",
        ]
        super().__init__("\n".join(lines))

        self.received = received
        self.promise_kind = promise_kind


__all__ = [
    "ExpectBaseError",
    "ExpectConfigError",
    "ExpectError",
    "ExpectPromiseError",
    "ExpectTypeError",
    "PatternArgumentError",
]
