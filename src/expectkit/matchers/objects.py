"""Matchers for properties, containment and object shape."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from expectkit.colors import EXPECTED, RECEIVED
from expectkit.equality import equals, get_key, has_key, is_asymmetric, object_is
from expectkit.errors import ExpectTypeError
from expectkit.handlers import ensure_not_nullish, ensure_type, handle_diff_failure, handle_failure
from expectkit.registry import register_builtin
from expectkit.serialize import get_type, serialize_one_line
from expectkit.types import MISSING


if TYPE_CHECKING:
    from expectkit.service import MatcherService


def _step(obj: Any, key: Any) -> tuple[bool, Any]:
    if isinstance(obj, (list, tuple)):
        try:
            index = int(key)
        except (TypeError, ValueError):
            return False, None
        if 0 <= index < len(obj):
            return True, obj[index]
        return False, None
    if has_key(obj, key):
        return True, get_key(obj, key)
    return False, None


def _walk(obj: Any, path: Sequence[Any]) -> tuple[list[Any], Any]:
    """Follow ``path`` from ``obj``; return the traversed keys and the last value reached."""
    traversed: list[Any] = []
    current = obj
    for key in path:
        found, value = _step(current, key)
        if not found:
            break
        traversed.append(key)
        current = value
    return traversed, current


def _format_path(path: Sequence[Any]) -> str:
    return ".".join(str(key) for key in path)


@register_builtin
def to_have_property(service: MatcherService, path: str | Sequence[Any], value: Any = MISSING) -> None:
    """Check that ``path`` resolves on the received value, optionally to ``value``.

    ``path`` is either a dotted string or a list of keys. List elements are
    addressed by index.
    """
    labels = ["path"] if value is MISSING else ["path", "value"]
    received = service.received
    ensure_not_nullish(service, received, "received", labels)
    ensure_type(service, path, ["string", "array"], "path", labels)

    keys = path.split(".") if isinstance(path, str) else list(path)
    if not keys:
        raise ExpectTypeError(
            service.assertion_chain,
            message=f"{EXPECTED('path')} must not be empty",
            expected=path,
            expected_labels=labels,
        )

    traversed, found = _walk(received, keys)
    has_path = len(traversed) == len(keys)
    passed = has_path and (value is MISSING or equals(found, value))

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected path: not {EXPECTED(_format_path(keys))}")
        if value is not MISSING:
            info.append("")
            info.append(f"Expected value: not {EXPECTED(serialize_one_line(value))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected path: {EXPECTED(_format_path(keys))}")
        if not has_path:
            info.append(f"Received path: {RECEIVED(_format_path(traversed))}")
            info.append("")
            info.append(f"Received value: {RECEIVED(serialize_one_line(found))}")
            return
        info.append("")
        info.append(f"Expected value: {EXPECTED(serialize_one_line(value))}")
        info.append(f"Received value: {RECEIVED(serialize_one_line(found))}")

    handle_failure(
        service,
        passed=passed,
        expected=None if value is MISSING else value,
        expected_labels=labels,
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_be_instance_of(service: MatcherService, expected: type) -> None:
    if not isinstance(expected, type):
        raise ExpectTypeError(
            service.assertion_chain,
            message=f"{EXPECTED('expected')} value must be a class",
            expected=expected,
            expected_type=get_type(expected),
            expected_labels=["expected"],
        )

    received = service.received
    passed = isinstance(received, expected)
    received_class = type(received).__name__

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected class: not {EXPECTED(expected.__name__)}")
        if type(received) is not expected:
            info.append(f"Received class:     {RECEIVED(received_class)}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected class: {EXPECTED(expected.__name__)}")
        info.append(f"Received class: {RECEIVED(received_class)}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        expected_labels=["expected"],
        handle_not=handle_not,
        handle_info=handle_info,
    )


def _ensure_collection(service: MatcherService) -> Any:
    received = service.received
    ensure_not_nullish(service, received, "received", ["expected"])
    if isinstance(received, Iterable):
        return received
    raise ExpectTypeError(
        service.assertion_chain,
        message=f"{RECEIVED('received')} value must be a string or an iterable",
        received=received,
        received_type=get_type(received),
        expected_labels=["expected"],
    )


def _containment_failure(service: MatcherService, passed: bool, expected: Any, kind: str) -> None:
    received = service.received

    def handle_not(info: list[str]) -> None:
        info.append(f"Expected {kind}: not {EXPECTED(serialize_one_line(expected))}")
        info.append(f"Received {get_type(received)}: {RECEIVED(serialize_one_line(received))}")

    def handle_info(info: list[str]) -> None:
        info.append(f"Expected {kind}: {EXPECTED(serialize_one_line(expected))}")
        info.append(f"Received {get_type(received)}: {RECEIVED(serialize_one_line(received))}")

    handle_failure(
        service,
        passed=passed,
        expected=expected,
        expected_labels=["expected"],
        handle_not=handle_not,
        handle_info=handle_info,
    )


@register_builtin
def to_contain(service: MatcherService, expected: Any) -> None:
    """Substring check for strings, identity membership for other iterables."""
    received = _ensure_collection(service)

    if isinstance(received, str):
        ensure_type(service, expected, ["string"], "expected", ["expected"])
        _containment_failure(service, expected in received, expected, "substring")
        return

    passed = any(object_is(item, expected) for item in received)
    _containment_failure(service, passed, expected, "value")


@register_builtin
def to_contain_equal(service: MatcherService, expected: Any) -> None:
    """Membership using deep equality."""
    received = _ensure_collection(service)
    passed = any(equals(item, expected) for item in received)
    _containment_failure(service, passed, expected, "value")


def _subset_matches(received: Any, expected: Any, seen: set[tuple[int, int]]) -> bool:
    if is_asymmetric(expected):
        return bool(expected.matches(received))
    if not isinstance(expected, (Mapping, list, tuple)):
        return equals(received, expected)

    # A pair already being matched further up the stack is assumed to match.
    pair = (id(received), id(expected))
    if pair in seen:
        return True
    seen.add(pair)
    try:
        return _container_subset_matches(received, expected, seen)
    finally:
        seen.discard(pair)


def _container_subset_matches(received: Any, expected: Any, seen: set[tuple[int, int]]) -> bool:
    if isinstance(expected, Mapping):
        return all(
            has_key(received, key) and _subset_matches(get_key(received, key), value, seen)
            for key, value in expected.items()
        )

    if not isinstance(received, (list, tuple)) or len(received) != len(expected):
        return False
    return all(_subset_matches(r, e, seen) for r, e in zip(received, expected))


def _received_subset(received: Any, expected: Any) -> Any:
    """Project ``received`` onto the shape of ``expected`` for the failure diff."""
    if isinstance(expected, Mapping) and not is_asymmetric(received):
        if isinstance(received, Mapping) or (received is not None and hasattr(received, "__dict__")):
            return {
                key: _received_subset(get_key(received, key), value)
                for key, value in expected.items()
                if has_key(received, key)
            }
    if isinstance(expected, (list, tuple)) and isinstance(received, (list, tuple)):
        if len(expected) == len(received):
            return [_received_subset(r, e) for r, e in zip(received, expected)]
    return received


@register_builtin
def to_match_object(service: MatcherService, expected: Mapping[str, Any] | Sequence[Any]) -> None:
    """Recursive subset match: every key in ``expected`` must match in received."""
    received = service.received
    ensure_type(service, received, ["mapping", "array", "object"], "received", ["expected"])
    ensure_type(service, expected, ["mapping", "array"], "expected", ["expected"])

    passed = _subset_matches(received, expected, set())
    handle_diff_failure(
        service,
        passed=passed,
        expected=expected,
        received=_received_subset(received, expected),
    )


__all__ = ["to_be_instance_of", "to_contain", "to_contain_equal", "to_have_property", "to_match_object"]
