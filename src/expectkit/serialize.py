"""Turn arbitrary values into display text for failure messages."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from typing import Any

from rich.pretty import pretty_repr

from expectkit.config import get_config


def serialize(value: Any) -> list[str]:
    """Render ``value`` as indented lines, one container item per line."""
    config = get_config()
    text = pretty_repr(
        value,
        expand_all=True,
        indent_size=config.indent_size,
        max_string=config.max_string,
    )
    return text.splitlines() or [""]


def serialize_one_line(value: Any) -> str:
    """Render ``value`` on a single line."""
    return pretty_repr(value, max_width=sys.maxsize, max_string=get_config().max_string)


def serialize_error(error: Any) -> Any:
    """Reduce an exception to a comparable mapping; other values pass through."""
    if not isinstance(error, BaseException):
        return error

    serialized: dict[str, Any] = {"name": type(error).__name__, "message": str(error)}
    for key, value in vars(error).items():
        if key.startswith("_") or key in serialized:
            continue
        serialized[key] = value
    return serialized


def get_type(value: Any) -> str:
    """Name of the value's type as shown in diagnostics."""
    if value is None:
        return "None"
    return type(value).__name__


def value_kind(value: Any) -> str:
    """Coarse kind of a value, used by type guards."""
    match value:
        case None:
            return "None"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case bytes() | bytearray():
            return "bytes"
        case list() | tuple():
            return "array"
        case Mapping():
            return "mapping"
        case type() | Callable():
            return "function"
        case _:
            return "object"


__all__ = ["get_type", "serialize", "serialize_error", "serialize_one_line", "value_kind"]
