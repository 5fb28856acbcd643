"""Tests for the stateless arithmetic in backend.engine."""

import pytest

from backend.engine import EvalError, evaluate, factorial, format_number, is_zero, parse_number
from backend.models import Operator


# --- Basic arithmetic ---

def test_addition():
    assert evaluate("5", "3", Operator.ADD) == "8"


def test_subtraction_can_go_negative():
    assert evaluate("4", "10", Operator.SUBTRACT) == "-6"


def test_multiplication_drops_trailing_zeros():
    assert evaluate("2.5", "4", Operator.MULTIPLY) == "10"


def test_division():
    assert evaluate("1", "4", Operator.DIVIDE) == "0.25"
    assert evaluate("1", "3", Operator.DIVIDE) == "0.3333333333333333"


@pytest.mark.parametrize("a", ["0", "7", "-2.5"])
def test_division_by_zero_raises(a):
    with pytest.raises(EvalError):
        evaluate(a, "0", Operator.DIVIDE)


def test_eval_error_is_an_arithmetic_error():
    with pytest.raises(ArithmeticError):
        evaluate("1", "0", Operator.DIVIDE)


def test_empty_operand_yields_zero():
    assert evaluate("", "3", Operator.ADD) == "0"
    assert evaluate("3", "", Operator.DIVIDE) == "0"


def test_no_operator_yields_zero():
    assert evaluate("5", "2", Operator.NONE) == "0"


def test_overflow_raises():
    with pytest.raises(EvalError):
        evaluate("1e200", "1e200", Operator.MULTIPLY)


# --- Square root ---

def test_square_root():
    assert evaluate("16", "16", Operator.SQUARE_ROOT) == "4"
    assert evaluate("2", "2", Operator.SQUARE_ROOT) == "1.4142135623730951"


def test_square_root_of_negative_raises():
    with pytest.raises(EvalError):
        evaluate("-4", "-4", Operator.SQUARE_ROOT)


# --- Factorial ---

@pytest.mark.parametrize("text, expected", [
    ("0", "1"),
    ("1", "1"),
    ("5", "120"),
    ("-5", "120"),
    ("4.6", "120"),
    ("2.5", "6"),
    ("0.4", "1"),
])
def test_factorial(text, expected):
    assert evaluate(text, text, Operator.FACTORIAL) == expected


def test_factorial_of_largest_double_fits_display():
    text = evaluate("170", "170", Operator.FACTORIAL)
    assert text.startswith("7.2574")
    assert text.endswith("e+306")
    assert len(text) <= 20


def test_factorial_overflow_raises():
    with pytest.raises(EvalError):
        factorial(171)


def test_factorial_of_huge_value_stops_at_overflow():
    with pytest.raises(EvalError):
        factorial(1e300)


# --- Formatting ---

def test_format_integral_float():
    assert format_number(8.0) == "8"


def test_format_negative_zero():
    assert format_number(-0.0) == "0"


def test_format_large_value_uses_scientific():
    assert format_number(1e20) == "1e+20"


def test_format_tiny_value_uses_scientific():
    assert format_number(1e-30) == "1e-30"


def test_format_rounds_fraction_to_fit():
    assert format_number(1234.5678, max_length=6) == "1234.6"


def test_format_never_exceeds_length():
    for value in (2.0 ** 70, -1 / 7, 123456789.123456789, -9.87654321e-200):
        assert len(format_number(value)) <= 20


def test_format_non_finite_raises():
    with pytest.raises(EvalError):
        format_number(float("inf"))


# --- Parsing ---

@pytest.mark.parametrize("text, expected", [
    ("-2.5", -2.5),
    ("0.", 0.0),
    ("-", 0.0),
    ("", 0.0),
    ("abc", 0.0),
    ("nan", 0.0),
    ("1e+21", 1e21),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_is_zero():
    assert is_zero("0")
    assert is_zero("-0.")
    assert not is_zero("0.001")
