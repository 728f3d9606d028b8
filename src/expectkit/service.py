"""The object returned by ``expect(received)``.

A :class:`MatcherService` carries the received value and an immutable set of
:class:`ChainModifiers`. Modifiers return new services; invoking a matcher is
the terminal step. Under ``resolves``/``rejects`` the invocation returns a
coroutine that awaits the received value before matching.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, replace
from typing import Any

from expectkit.colors import RECEIVED
from expectkit.errors import ExpectConfigError, ExpectPromiseError, ExpectTypeError
from expectkit.registry import MatcherFunction, get_matcher_registry
from expectkit.types import Awaiting, PromiseKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChainModifiers:
    """Modifiers applied to an expectation.

    ``resolves`` and ``rejects`` are mutually exclusive.
    """

    negate: bool = False
    resolves: bool = False
    rejects: bool = False

    def __post_init__(self) -> None:
        if self.resolves and self.rejects:
            raise ExpectConfigError('Cannot combine "resolves" and "rejects" modifiers.')

    @property
    def awaiting(self) -> Awaiting | None:
        if self.resolves:
            return Awaiting.RESOLVES
        if self.rejects:
            return Awaiting.REJECTS
        return None


class MatcherService:
    """Expectation on a single received value."""

    def __init__(self, received: Any, modifiers: ChainModifiers | None = None) -> None:
        self.received = received
        self.modifiers = modifiers or ChainModifiers()
        self.assertion_chain: list[str] = []
        self.matcher_name = ""

    def _with(self, **changes: bool) -> MatcherService:
        return MatcherService(self.received, replace(self.modifiers, **changes))

    @property
    def not_(self) -> MatcherService:
        return self._with(negate=True)

    @property
    def resolves(self) -> MatcherService:
        return self._with(resolves=True)

    @property
    def rejects(self) -> MatcherService:
        return self._with(rejects=True)

    @property
    def not_modifier(self) -> bool:
        return self.modifiers.negate

    @property
    def resolves_modifier(self) -> bool:
        return self.modifiers.resolves

    @property
    def rejects_modifier(self) -> bool:
        return self.modifiers.rejects

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        fn = get_matcher_registry().get(name)
        if fn is None:
            msg = f"{type(self).__name__!r} has no matcher {name!r}"
            raise AttributeError(msg)

        def invoker(*args: Any, **kwargs: Any) -> Any:
            return self.invoke(name, fn, args, kwargs)

        invoker.__name__ = name
        invoker.__doc__ = fn.__doc__
        return invoker

    def invoke(
        self,
        name: str,
        fn: MatcherFunction,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        """Run ``fn`` against the received value under the current modifiers."""
        self.matcher_name = name
        awaiting = self.modifiers.awaiting

        chain: list[str] = []
        if awaiting is not None:
            chain.append(awaiting.value)
        if self.modifiers.negate:
            chain.append("not")
        chain.append(name)
        self.assertion_chain = chain

        kwargs = kwargs or {}

        def bound(service: MatcherService) -> Any:
            return fn(service, *args, **kwargs)

        logger.debug("Invoking %s", ".".join(chain))
        if awaiting is None:
            return bound(self)
        return self._invoke_async(bound)

    def _invoke_async(self, bound: Callable[[MatcherService], Any]) -> Coroutine[Any, Any, Any]:
        received = self.received
        if callable(received) and not inspect.isawaitable(received):
            received = received()

        if not inspect.isawaitable(received):
            raise ExpectTypeError(
                self.assertion_chain,
                message=f"{RECEIVED('received')} value must be an awaitable or a function returning an awaitable",
                received=received,
                received_type=type(received).__name__,
            )

        return self._settle_then_match(received, bound)

    async def _settle_then_match(self, awaitable: Any, bound: Callable[[MatcherService], Any]) -> Any:
        try:
            value = await awaitable
        except Exception as exc:
            logger.debug("Awaited value raised %s", type(exc).__name__)
            if self.modifiers.resolves:
                self._throw_promise_error(PromiseKind.REJECTED, exc)
            self.received = exc
        else:
            if self.modifiers.rejects:
                self._throw_promise_error(PromiseKind.RESOLVED, value)
            self.received = value

        return bound(self)

    def _throw_promise_error(self, kind: PromiseKind, value: Any) -> None:
        if kind is PromiseKind.RESOLVED:
            message = f"{RECEIVED('received')} promise resolved instead of rejected"
        else:
            message = f"{RECEIVED('received')} promise rejected instead of resolved"
        raise ExpectPromiseError(self.assertion_chain, message=message, received=value, promise_kind=kind)


__all__ = ["ChainModifiers", "MatcherService"]
