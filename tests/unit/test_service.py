"""Tests for expectkit.service and the expect entry point."""

import asyncio
import inspect

import pytest

from expectkit import expect
from expectkit.errors import (
    ExpectConfigError,
    ExpectError,
    ExpectPromiseError,
    ExpectTypeError,
)
from expectkit.service import ChainModifiers, MatcherService
from expectkit.types import Awaiting, PromiseKind


async def resolve_with(value):
    await asyncio.sleep(0)
    return value


async def reject_with(error):
    await asyncio.sleep(0)
    raise error


class TestChainModifiers:
    """Tests for the immutable modifier set."""

    def test_defaults(self):
        modifiers = ChainModifiers()
        assert not modifiers.negate
        assert modifiers.awaiting is None

    def test_resolves_and_rejects_are_exclusive(self):
        with pytest.raises(ExpectConfigError, match="resolves"):
            ChainModifiers(resolves=True, rejects=True)

    def test_awaiting_kind(self):
        assert ChainModifiers(resolves=True).awaiting is Awaiting.RESOLVES
        assert ChainModifiers(rejects=True, negate=True).awaiting is Awaiting.REJECTS


class TestModifiers:
    """Tests for modifier application on MatcherService."""

    def test_modifiers_return_new_services(self):
        service = expect(1)
        negated = service.not_
        assert negated is not service
        assert negated.not_modifier
        assert not service.not_modifier

    def test_not_is_idempotent(self):
        assert expect(1).not_.not_.not_modifier

    def test_conflicting_modifiers_fail_immediately(self):
        with pytest.raises(ExpectConfigError):
            expect(1).resolves.rejects
        with pytest.raises(ExpectConfigError):
            expect(1).rejects.not_.resolves

    def test_not_combines_with_awaiting(self):
        service = expect(1).resolves.not_
        assert service.resolves_modifier
        assert service.not_modifier
        assert not service.rejects_modifier


class TestInvocation:
    """Tests for synchronous matcher invocation."""

    def test_returns_none_on_pass(self):
        assert expect(1).to_be(1) is None

    def test_records_chain(self):
        with pytest.raises(ExpectError) as exc_info:
            expect(1).not_.to_be(1)
        assert "expect(received).not.to_be(expected)" in str(exc_info.value)

    def test_unknown_matcher(self):
        with pytest.raises(AttributeError, match="to_be_purple"):
            expect(1).to_be_purple()

    def test_private_names_are_not_matchers(self):
        with pytest.raises(AttributeError):
            expect(1)._secret

    def test_extra_arguments_rejected(self):
        with pytest.raises(ExpectConfigError, match="at most one argument"):
            expect(1, 2)

    def test_direct_construction(self):
        service = MatcherService([1, 2])
        service.to_equal([1, 2])
        assert service.matcher_name == "to_equal"
        assert service.assertion_chain == ["to_equal"]


class TestAwaitables:
    """Tests for the resolves and rejects paths."""

    def test_resolves_returns_coroutine(self):
        result = expect(resolve_with(3)).resolves.to_be(3)
        assert inspect.isawaitable(result)
        asyncio.run(result)

    def test_resolves_matches_resolved_value(self):
        with pytest.raises(ExpectError, match=r"expect\(received\)\.resolves\.to_be"):
            asyncio.run(expect(resolve_with(3)).resolves.to_be(4))

    def test_resolves_with_negation(self):
        asyncio.run(expect(resolve_with(3)).resolves.not_.to_be(4))

    def test_rejects_receives_the_exception(self):
        asyncio.run(expect(reject_with(ValueError("boom"))).rejects.to_raise("boom"))
        asyncio.run(expect(reject_with(ValueError("boom"))).rejects.to_be_instance_of(ValueError))

    def test_callable_returning_awaitable(self):
        asyncio.run(expect(lambda: resolve_with("ok")).resolves.to_equal("ok"))

    def test_rejection_under_resolves(self):
        with pytest.raises(ExpectPromiseError) as exc_info:
            asyncio.run(expect(reject_with(KeyError("k"))).resolves.to_be(1))
        error = exc_info.value
        assert error.promise_kind is PromiseKind.REJECTED
        assert isinstance(error.received, KeyError)
        assert "Rejected to value" in str(error)

    def test_resolution_under_rejects(self):
        with pytest.raises(ExpectPromiseError, match="Resolved") as exc_info:
            asyncio.run(expect(resolve_with(5)).rejects.to_be(5))
        assert exc_info.value.promise_kind is PromiseKind.RESOLVED
        assert "promise resolved instead of rejected" in str(exc_info.value)

    def test_promise_error_is_assertion_error(self):
        with pytest.raises(AssertionError):
            asyncio.run(expect(resolve_with(5)).rejects.to_be(5))

    def test_non_awaitable_raises_synchronously(self):
        with pytest.raises(ExpectTypeError, match="must be an awaitable"):
            expect(5).resolves.to_be(5)

    def test_callable_returning_plain_value(self):
        with pytest.raises(ExpectTypeError, match="must be an awaitable"):
            expect(lambda: 5).rejects.to_raise()
