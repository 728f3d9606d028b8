"""Matcher registry for plugin-style matcher registration."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar


logger = logging.getLogger(__name__)

MatcherFunction = Callable[..., Any]

F = TypeVar("F", bound=MatcherFunction)

_matcher_registry: dict[str, MatcherFunction] = {}
_builtin_registry: dict[str, MatcherFunction] = {}
_loaded_plugins: set[str] = set()


def matcher(
    fn: F | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> F | Any:
    """Register a matcher function so ``expect(...)`` exposes it.

    Can be used as a decorator with or without arguments:

        @matcher
        def to_be_even(service): ...

        @matcher(name="to_be_odd")
        def odd(service): ...

    Args:
        fn: Matcher taking the service followed by the expected arguments.
        enabled: Whether to register this matcher (default True).
        name: Custom name for registry lookup (defaults to the function name).
    """

    def decorator(fn: F) -> F:
        if enabled:
            _matcher_registry[name or fn.__name__] = fn
        return fn

    if fn is not None:
        return decorator(fn)
    return decorator


def get_matcher_registry() -> dict[str, MatcherFunction]:
    """Get the global matcher registry."""
    return _matcher_registry


def clear_matcher_registry() -> None:
    """Clear all registered matchers, keeping built-ins."""
    _matcher_registry.clear()
    _matcher_registry.update(_builtin_registry)


def _import_matcher(import_path: str) -> MatcherFunction:
    """Import a matcher from "module.path:name" or "module.path.name"."""
    if ":" in import_path:
        module_path, attr = import_path.rsplit(":", 1)
    elif "." in import_path:
        module_path, attr = import_path.rsplit(".", 1)
    else:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    module = importlib.import_module(module_path)
    fn = getattr(module, attr)

    if isinstance(fn, type) or not callable(fn):
        msg = f"{import_path} is not a matcher function"
        raise TypeError(msg)

    return fn


def resolve_matcher(name: str) -> MatcherFunction:
    """Resolve a matcher by registry name or import string.

    Raises:
        ValueError: If the matcher cannot be resolved.
    """
    if name in _matcher_registry:
        return _matcher_registry[name]

    if ":" in name or "." in name:
        return _import_matcher(name)

    available = ", ".join(sorted(_matcher_registry.keys()))
    msg = f"Unknown matcher: {name}. Available: {available}"
    raise ValueError(msg)


def load_plugins(import_paths: Iterable[str]) -> None:
    """Import modules whose import registers additional matchers.

    Each module is imported once per process.
    """
    for import_path in import_paths:
        if import_path in _loaded_plugins:
            continue
        logger.debug("Loading matcher plugin %s", import_path)
        importlib.import_module(import_path)
        _loaded_plugins.add(import_path)


def register_builtin(fn: F) -> F:
    """Register a built-in matcher (persists through clear)."""
    _matcher_registry[fn.__name__] = fn
    _builtin_registry[fn.__name__] = fn
    return fn


__all__ = [
    "MatcherFunction",
    "clear_matcher_registry",
    "get_matcher_registry",
    "load_plugins",
    "matcher",
    "register_builtin",
    "resolve_matcher",
]
