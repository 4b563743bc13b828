"""Tests for literal coercion and loose value semantics."""

import math
import pytest
from rule_designer.rule_engine.literals import (
    UNDEFINED,
    LiteralKind,
    coerce,
    loose_equals,
    stringify,
    to_number,
)


class TestCoerce:
    """Test the coerce function."""

    def test_integer_literal(self):
        coerced = coerce("18")
        assert coerced.kind is LiteralKind.NUMBER
        assert coerced.value == 18
        assert isinstance(coerced.value, int)

    def test_decimal_and_exponent_literals(self):
        assert coerce("18.5").value == 18.5
        assert coerce("-0.25").value == -0.25
        assert coerce("1e3").value == 1000
        assert coerce(".5").value == 0.5

    def test_whitespace_and_blank(self):
        """Surrounding whitespace is ignored and blank text is zero."""
        assert coerce(" 42 ").value == 42
        assert coerce("").kind is LiteralKind.NUMBER
        assert coerce("").value == 0

    def test_prefixed_integers_and_infinity(self):
        assert coerce("0x1F").value == 31
        assert coerce("0b101").value == 5
        assert coerce("0o17").value == 15
        assert coerce("Infinity").value == math.inf
        assert coerce("-Infinity").value == -math.inf

    def test_booleans_are_exact(self):
        assert coerce("true").kind is LiteralKind.BOOLEAN
        assert coerce("true").value is True
        assert coerce("false").value is False
        assert coerce("True").kind is LiteralKind.TEXT

    def test_text(self):
        """Strings Python would parse but the designer does not stay text."""
        for text in ("abc", "nan", "inf", "1_000", "12abc", "0x"):
            coerced = coerce(text)
            assert coerced.kind is LiteralKind.TEXT, text
            assert coerced.value == text

    def test_to_drl(self):
        assert coerce("18").to_drl() == "18"
        assert coerce("18.50").to_drl() == "18.50"
        assert coerce("true").to_drl() == "true"
        assert coerce("gold").to_drl() == '"gold"'

    @pytest.mark.parametrize("text", ["18", "2.5", "-7", "1e3", "0x10", "true", "false", "Infinity"])
    def test_coercion_is_idempotent(self, text):
        once = coerce(text)
        twice = coerce(stringify(once.value))
        assert twice.value == once.value
        assert twice.kind is once.kind


class TestStringAndNumberForms:
    """Test stringify and to_number."""

    def test_stringify(self):
        assert stringify(UNDEFINED) == "undefined"
        assert stringify(None) == "null"
        assert stringify(True) == "true"
        assert stringify(25) == "25"
        assert stringify(25.0) == "25"
        assert stringify(1500.5) == "1500.5"
        assert stringify(math.nan) == "NaN"
        assert stringify({"a": 1}) == "[object Object]"
        assert stringify([1, None, "x"]) == "1,,x"

    def test_stringify_float_notation(self):
        assert stringify(1.5e-7) == "1.5e-7"
        assert stringify(0.00001) == "0.00001"
        assert stringify(-0.5) == "-0.5"
        assert stringify(100.0) == "100"
        assert stringify(1e16) == "10000000000000000"
        assert stringify(1e21) == "1e+21"
        assert stringify(1.25e22) == "1.25e+22"
        assert stringify(-0.0) == "0"

    def test_to_number(self):
        assert math.isnan(to_number(UNDEFINED))
        assert to_number(None) == 0
        assert to_number(True) == 1
        assert to_number("12") == 12
        assert math.isnan(to_number("twelve"))
        assert math.isnan(to_number({"a": 1}))
        assert to_number([]) == 0
        assert to_number([7]) == 7


class TestLooseEquals:
    """Test loose_equals."""

    def test_number_and_string(self):
        assert loose_equals(5, "5") is True
        assert loose_equals("5", 5) is True
        assert loose_equals("", 0) is True
        assert loose_equals("abc", 0) is False

    def test_booleans_compare_as_numbers(self):
        assert loose_equals(True, 1) is True
        assert loose_equals("1", True) is True
        assert loose_equals(False, "") is True
        assert loose_equals(True, "true") is False

    def test_null_and_undefined(self):
        assert loose_equals(None, UNDEFINED) is True
        assert loose_equals(UNDEFINED, UNDEFINED) is True
        assert loose_equals(None, 0) is False
        assert loose_equals(UNDEFINED, "undefined") is False

    def test_compound_values(self):
        data = {"a": 1}
        assert loose_equals(data, data) is True
        assert loose_equals({"a": 1}, {"a": 1}) is False
        assert loose_equals([1, 2], "1,2") is True
        assert loose_equals({"a": 1}, "[object Object]") is True

    def test_nan_is_never_equal(self):
        assert loose_equals(math.nan, math.nan) is False
