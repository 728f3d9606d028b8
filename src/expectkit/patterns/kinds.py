"""Type kinds recognised by the ``any_`` pattern."""

from __future__ import annotations

import builtins
import collections.abc
import types
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Closed set of kinds with a dedicated check; everything else is NOMINAL."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"
    NOMINAL = "nominal"


def kind_of(expected: type) -> TypeKind:
    """Map a class to the kind used to check values against it."""
    match expected:
        case builtins.str:
            return TypeKind.STRING
        case builtins.int:
            return TypeKind.INTEGER
        case builtins.float:
            return TypeKind.FLOAT
        case builtins.bool:
            return TypeKind.BOOLEAN
        case builtins.bytes:
            return TypeKind.BYTES
        case collections.abc.Callable | types.FunctionType:
            return TypeKind.FUNCTION
        case builtins.list:
            return TypeKind.ARRAY
        case builtins.object:
            return TypeKind.OBJECT
        case _:
            return TypeKind.NOMINAL


def is_kind(kind: TypeKind, expected: type, value: Any) -> bool:
    """Check ``value`` against ``expected`` using the rules of ``kind``."""
    match kind:
        case TypeKind.STRING:
            return isinstance(value, str)
        case TypeKind.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        case TypeKind.FLOAT:
            return isinstance(value, float)
        case TypeKind.BOOLEAN:
            return isinstance(value, bool)
        case TypeKind.BYTES:
            return isinstance(value, (bytes, bytearray))
        case TypeKind.FUNCTION:
            return callable(value)
        case TypeKind.ARRAY:
            return isinstance(value, (list, tuple))
        case TypeKind.OBJECT:
            # Every Python value is an object, None included.
            return True
        case TypeKind.NOMINAL:
            return isinstance(value, expected)


__all__ = ["TypeKind", "is_kind", "kind_of"]
