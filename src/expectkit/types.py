"""Shared types for the expectkit assertion engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class _Missing:
    """Sentinel for an argument that was not supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class Awaiting(Enum):
    """Which settlement a chain expects from an awaitable received value."""

    RESOLVES = "resolves"
    REJECTS = "rejects"


class PromiseKind(Enum):
    """How an awaited received value actually settled."""

    RESOLVED = "Resolved"
    REJECTED = "Rejected"


@runtime_checkable
class AsymmetricMatcher(Protocol):
    """Anything that decides equality with a predicate instead of structure."""

    @property
    def expected_label(self) -> str: ...

    def matches(self, received: Any) -> bool: ...


def is_nullish(value: Any) -> bool:
    """Return True for the two nullish sentinels, ``None`` and ``MISSING``."""
    return value is None or value is MISSING


__all__ = ["MISSING", "AsymmetricMatcher", "Awaiting", "PromiseKind", "is_nullish"]
