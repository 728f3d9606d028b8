"""Tests for the built-in matchers."""

import math
import re
from dataclasses import dataclass
from unittest.mock import MagicMock, Mock

import pytest

from expectkit import expect
from expectkit.errors import ExpectError, ExpectTypeError
from expectkit.matchers import DEEP_EQUALITY_NOTE
from expectkit.patterns import any_, anything, string_containing


@dataclass
class Account:
    owner: str
    balance: float


def failure_message(fn) -> str:
    with pytest.raises(ExpectError) as exc_info:
        fn()
    return str(exc_info.value)


class TestToBe:
    """Tests for to_be."""

    def test_scalars(self):
        expect(1).to_be(1)
        expect("a").to_be("a")
        expect(math.nan).to_be(math.nan)

    def test_fresh_list_fails_with_advice(self):
        message = failure_message(lambda: expect(["a"]).to_be(["a"]))
        assert DEEP_EQUALITY_NOTE in message
        assert "expect(received).to_be(expected) // identity" in message

    def test_same_reference_passes(self):
        items = ["a"]
        expect(items).to_be(items)

    def test_no_advice_when_values_differ(self):
        message = failure_message(lambda: expect(1).to_be(2))
        assert DEEP_EQUALITY_NOTE not in message

    def test_pattern_expected(self):
        expect(5).to_be(any_(int))

    def test_negated(self):
        expect(1).not_.to_be(2)
        message = failure_message(lambda: expect(1).not_.to_be(1))
        assert "Expected: not 1" in message

    def test_matcher_result_attached(self):
        with pytest.raises(ExpectError) as exc_info:
            expect(1).to_be(2)
        result = exc_info.value.matcher_result
        assert result.name == "to_be"
        assert result.passed is False
        assert result.expected == 2
        assert result.received == 1
        assert result.message == exc_info.value.message


class TestToEqual:
    """Tests for to_equal and to_strict_equal."""

    def test_nested_equal_values(self):
        expect({"a": 1, "b": [2, 3]}).to_equal({"a": 1, "b": [2, 3]})

    def test_diff_shows_changed_element(self):
        message = failure_message(lambda: expect({"a": 1, "b": [2, 3]}).to_equal({"a": 1, "b": [2, 4]}))
        lines = message.splitlines()
        assert any(line.startswith("- ") and "4" in line for line in lines)
        assert any(line.startswith("+ ") and "3" in line for line in lines)
        assert "@@ -1," in message
        assert "// deep equality" in message

    def test_satisfied_patterns_drop_out_of_diff(self):
        message = failure_message(lambda: expect({"id": 7, "name": "x"}).to_equal({"id": any_(int), "name": "y"}))
        assert "Any<int>" not in message

    def test_type_mismatch_reported(self):
        message = failure_message(lambda: expect("1").to_equal(1))
        assert "Expected type: int" in message
        assert "Received type: str" in message

    def test_string_diff(self):
        message = failure_message(lambda: expect("hello\nworld").to_equal("hello\nthere"))
        assert "  hello" in message
        assert "- there" in message
        assert "+ world" in message

    def test_dataclasses(self):
        expect(Account("ann", 1.0)).to_equal(Account("ann", 1.0))
        expect(Account("ann", 1.0)).to_equal(Account(owner=string_containing("an"), balance=anything()))

    def test_negated(self):
        message = failure_message(lambda: expect({"a": 1}).not_.to_equal({"a": 1}))
        assert "Expected: not {'a': 1}" in message

    def test_strict_equal(self):
        expect([1, {"a": 2}]).to_strict_equal([1, {"a": 2}])
        failure_message(lambda: expect((1,)).to_strict_equal([1]))
        failure_message(lambda: expect([5]).to_strict_equal([any_(int)]))


class TestTruthiness:
    """Tests for to_be_none, to_be_nan, to_be_truthy and to_be_falsy."""

    def test_none(self):
        expect(None).to_be_none()
        expect(0).not_.to_be_none()
        assert "Received: 0" in failure_message(lambda: expect(0).to_be_none())

    def test_nan(self):
        expect(float("nan")).to_be_nan()
        expect(1.0).not_.to_be_nan()
        failure_message(lambda: expect("nan").to_be_nan())

    def test_truthy_and_falsy(self):
        expect([1]).to_be_truthy()
        expect([]).to_be_falsy()
        expect("").not_.to_be_truthy()
        failure_message(lambda: expect(0).to_be_truthy())


class TestNumbers:
    """Tests for the numeric matchers."""

    def test_close_to_default_precision(self):
        expect(0.1 + 0.2).to_be_close_to(0.3)
        expect(0.1 + 0.2).to_be_close_to(0.3, 2)

    def test_close_to_fails_at_high_precision(self):
        message = failure_message(lambda: expect(0.1 + 0.2).to_be_close_to(0.3, 20))
        assert "Expected precision:    20" in message
        assert "Received difference:" in message

    def test_close_to_precision_ten_is_within_float_error(self):
        expect(0.1 + 0.2).to_be_close_to(0.3, 10)

    def test_close_to_infinities(self):
        expect(math.inf).to_be_close_to(math.inf)
        failure_message(lambda: expect(math.inf).to_be_close_to(-math.inf))

    def test_close_to_negated(self):
        expect(1.0).not_.to_be_close_to(1.1, 2)
        message = failure_message(lambda: expect(1.0).not_.to_be_close_to(1.001, 2))
        assert "Expected difference: >= 0.005" in message

    def test_close_to_type_errors(self):
        with pytest.raises(ExpectTypeError, match="value must be a number"):
            expect("1").to_be_close_to(1)
        with pytest.raises(ExpectTypeError, match="non-negative integer"):
            expect(1).to_be_close_to(1, -1)

    @pytest.mark.parametrize(
        ("matcher", "received", "expected"),
        [
            ("to_be_greater_than", 3, 2),
            ("to_be_greater_than_or_equal", 2, 2),
            ("to_be_less_than", 1, 2),
            ("to_be_less_than_or_equal", 2.0, 2),
        ],
    )
    def test_comparisons_pass(self, matcher, received, expected):
        getattr(expect(received), matcher)(expected)
        with pytest.raises(ExpectError):
            getattr(expect(received).not_, matcher)(expected)

    def test_comparison_failure_message(self):
        message = failure_message(lambda: expect(2).to_be_greater_than(3))
        assert "Expected: > 3" in message
        assert "Received:   2" in message

    def test_comparison_requires_numbers(self):
        with pytest.raises(ExpectTypeError):
            expect("3").to_be_greater_than(1)
        with pytest.raises(ExpectTypeError):
            expect(3).to_be_less_than(None)


class TestStrings:
    """Tests for to_have_length and to_match."""

    def test_length(self):
        expect([1, 2]).to_have_length(2)
        expect("abc").to_have_length(3)
        expect({"a": 1}).not_.to_have_length(2)
        message = failure_message(lambda: expect("abc").to_have_length(2))
        assert "Received length: 3" in message

    def test_length_type_errors(self):
        with pytest.raises(ExpectTypeError, match="must support len"):
            expect(5).to_have_length(1)
        with pytest.raises(ExpectTypeError, match="must not be None nor MISSING"):
            expect(None).to_have_length(1)
        with pytest.raises(ExpectTypeError):
            expect("abc").to_have_length("3")

    def test_match(self):
        expect("hello").to_match("ell")
        expect("hello").to_match(re.compile(r"^h.*o$"))
        expect("hello").not_.to_match("xyz")

    def test_match_failure(self):
        message = failure_message(lambda: expect("hello").to_match(re.compile(r"\d")))
        assert "Expected pattern: /\\d/" in message
        assert "Received string:  'hello'" in message

    @pytest.mark.parametrize(
        "run",
        [
            lambda: expect("hello").to_match("xyz"),
            lambda: expect("hello").to_match(re.compile(r"\d")),
            lambda: expect("hello").not_.to_match("ell"),
            lambda: expect("hello").not_.to_match(re.compile("h")),
        ],
    )
    def test_match_failure_columns_align(self, run):
        expected_line, received_line = failure_message(run).splitlines()[-2:]
        assert expected_line.startswith("Expected ")
        assert received_line.startswith("Received string:")
        assert received_line.index("'hello'") == len(expected_line) - len(expected_line.split(" ")[-1])

    def test_match_requires_string(self):
        with pytest.raises(ExpectTypeError):
            expect(1).to_match("1")
        with pytest.raises(ExpectTypeError):
            expect("1").to_match(1)


class TestObjects:
    """Tests for the object matchers."""

    def test_have_property_path(self):
        data = {"a": {"b": [1, {"c": 2}]}}
        expect(data).to_have_property("a.b.1.c", 2)
        expect(data).to_have_property(["a", "b"])
        expect(data).not_.to_have_property("a.x")

    def test_have_property_on_objects(self):
        expect(Account("ann", 3.0)).to_have_property("owner", "ann")

    def test_have_property_failure(self):
        message = failure_message(lambda: expect({"a": {"b": 1}}).to_have_property("a.x.y"))
        assert "Expected path: a.x.y" in message
        assert "Received path: a" in message

    def test_have_property_value_mismatch(self):
        message = failure_message(lambda: expect({"a": 1}).to_have_property("a", 2))
        assert "Expected value: 2" in message
        assert "Received value: 1" in message

    def test_instance_of(self):
        expect(ValueError("x")).to_be_instance_of(Exception)
        expect(1).not_.to_be_instance_of(str)
        message = failure_message(lambda: expect(1).to_be_instance_of(str))
        assert "Received class: int" in message
        with pytest.raises(ExpectTypeError):
            expect(1).to_be_instance_of("str")

    def test_contain_uses_identity(self):
        first = {"a": 1}
        expect([first]).to_contain(first)
        expect([{"a": 1}]).not_.to_contain({"a": 1})
        expect([1, 2, 3]).to_contain(2)
        expect("hello").to_contain("ell")
        expect({"key": 1}).to_contain("key")

    def test_contain_equal(self):
        expect([{"a": 1}]).to_contain_equal({"a": 1})
        expect([{"a": 1}]).to_contain_equal({"a": any_(int)})
        expect([{"a": 1}]).not_.to_contain_equal({"a": 2})

    def test_contain_type_errors(self):
        with pytest.raises(ExpectTypeError):
            expect(5).to_contain(1)
        with pytest.raises(ExpectTypeError):
            expect("abc").to_contain(1)

    def test_match_object(self):
        received = {"a": 1, "b": {"c": 2, "d": 3}, "e": [1, 2]}
        expect(received).to_match_object({"b": {"c": 2}})
        expect(received).to_match_object({"e": [1, any_(int)]})
        expect(received).not_.to_match_object({"b": {"c": 5}})

    def test_match_object_checks_every_use_of_a_shared_sub_mapping(self):
        shared = {"x": 1}
        expect({"a": {"x": 1}, "b": {"x": 1}}).to_match_object({"a": shared, "b": shared})
        with pytest.raises(ExpectError):
            expect({"a": {"x": 1}, "b": {"x": 2}}).to_match_object({"a": shared, "b": shared})
        with pytest.raises(ExpectError):
            expect([{"x": 1}, {"x": 9}]).to_match_object([shared, shared])

    def test_match_object_diff_uses_received_subset(self):
        message = failure_message(lambda: expect({"a": 1, "zzz": 2}).to_match_object({"a": 5}))
        assert "zzz" not in message

    def test_match_object_requires_shapes(self):
        with pytest.raises(ExpectTypeError):
            expect(1).to_match_object({"a": 1})
        with pytest.raises(ExpectTypeError):
            expect({"a": 1}).to_match_object("a")


def explode():
    raise ZeroDivisionError("division by zero")


class TestToRaise:
    """Tests for to_raise."""

    @pytest.mark.parametrize(
        "expected",
        [
            ZeroDivisionError,
            ArithmeticError,
            "division",
            re.compile(r"zero$"),
            ZeroDivisionError("division by zero"),
            any_(ArithmeticError),
        ],
    )
    def test_matching_expectations(self, expected):
        expect(explode).to_raise(expected)

    def test_no_argument(self):
        expect(explode).to_raise()
        expect(lambda: None).not_.to_raise()

    def test_did_not_raise(self):
        message = failure_message(lambda: expect(lambda: None).to_raise())
        assert "Received function did not raise" in message

    def test_wrong_class(self):
        message = failure_message(lambda: expect(explode).to_raise(KeyError))
        assert "Expected class: KeyError" in message
        assert "Received name:    ZeroDivisionError" in message

    def test_negated_with_class(self):
        expect(explode).not_.to_raise(KeyError)
        failure_message(lambda: expect(explode).not_.to_raise(ZeroDivisionError))

    def test_result_carries_serialized_error(self):
        with pytest.raises(ExpectError) as exc_info:
            expect(explode).to_raise("nope")
        assert exc_info.value.matcher_result.received == {
            "name": "ZeroDivisionError",
            "message": "division by zero",
        }

    def test_type_errors(self):
        with pytest.raises(ExpectTypeError, match="must be a function"):
            expect(5).to_raise()
        with pytest.raises(ExpectTypeError):
            expect(explode).to_raise(5)


class TestMocks:
    """Tests for the mock call matchers."""

    def test_called(self):
        mock = Mock()
        expect(mock).not_.to_have_been_called()
        mock(1, x=2)
        expect(mock).to_have_been_called()
        expect(mock).to_have_been_called_times(1)

    def test_not_called_message(self):
        message = failure_message(lambda: expect(Mock()).to_have_been_called())
        assert "Received number of calls:    0" in message

    def test_called_with(self):
        mock = MagicMock()
        mock("a")
        mock(1, x=2)
        expect(mock).to_have_been_called_with("a")
        expect(mock).to_have_been_called_with(any_(int), x=anything())
        expect(mock).not_.to_have_been_called_with("b")

    def test_last_and_nth_call(self):
        mock = Mock()
        mock("first")
        mock("second")
        expect(mock).to_have_been_last_called_with("second")
        expect(mock).to_have_been_nth_called_with(1, "first")
        expect(mock).not_.to_have_been_nth_called_with(3, "third")

    def test_called_with_failure_lists_calls(self):
        mock = Mock()
        mock("a")
        message = failure_message(lambda: expect(mock).to_have_been_called_with("b"))
        assert "Expected: 'b'" in message
        assert "1: 'a'" in message
        assert "Number of calls: 1" in message

    def test_type_errors(self):
        with pytest.raises(ExpectTypeError, match="must be a mock"):
            expect(lambda: None).to_have_been_called()
        with pytest.raises(ExpectTypeError):
            expect(Mock()).to_have_been_nth_called_with(0, "a")
        with pytest.raises(ExpectTypeError):
            expect(Mock()).to_have_been_called_times(-1)
