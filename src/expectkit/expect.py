"""The ``expect`` entry point."""

from __future__ import annotations

from typing import Any

from expectkit.config import get_config
from expectkit.errors import ExpectConfigError
from expectkit.patterns.factory import PatternFactory
from expectkit.registry import load_plugins
from expectkit.service import MatcherService
from expectkit.types import MISSING


class Expect(PatternFactory):
    """Callable building expectations; doubles as the pattern namespace.

    ``expect(value)`` starts an expectation and ``expect.any(int)``,
    ``expect.not_.string_containing("x")`` build patterns.
    """

    def __call__(self, received: Any = MISSING, *rest: Any) -> MatcherService:
        if rest:
            msg = f"Expect takes at most one argument. Received {len(rest) + 1} arguments."
            raise ExpectConfigError(msg)

        load_plugins(get_config().plugins)
        return MatcherService(received)


expect = Expect()


__all__ = ["Expect", "expect"]
