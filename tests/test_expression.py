import pytest

from engine import expression
from engine.errors import InvalidAmountError
from engine.expression import evaluate, parse_amount, press


@pytest.mark.parametrize("expr, expected", [
    ("12+8-", "20"),
    ("1200+300", "1500"),
    ("1000-250+50", "800"),
    ("500", "500"),
    ("-5", "-5"),
    ("+7", "7"),
    ("", "0"),
    ("¥1,200+300", "1500"),
    ("3-10", "-7"),
])
def test_evaluate(expr, expected):
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr", ["abc", "1++2", "1+-2", "-", "+", "x-"])
def test_evaluate_malformed_returns_input_unchanged(expr):
    assert evaluate(expr) == expr


def test_evaluate_drops_only_one_trailing_operator():
    assert evaluate("5+-") == "5+-"
    assert evaluate("5+") == "5"


def test_parse_amount_accepts_positive_results():
    assert parse_amount("1200+300") == 1500
    assert parse_amount(42) == 42
    assert parse_amount("100-") == 100


@pytest.mark.parametrize("value", ["0", "", "5-10", "abc", "1++2", 0, -3, True])
def test_parse_amount_rejects_non_positive_or_non_numeric(value):
    with pytest.raises(InvalidAmountError):
        parse_amount(value)


def test_oversized_number_is_kept_not_raised():
    digits = "9" * 5000
    assert evaluate(digits) == digits
    assert evaluate(digits + "+1") == digits + "+1"
    with pytest.raises(InvalidAmountError):
        parse_amount(digits)


def test_keypad_clear_and_delete():
    assert expression.clear() == "0"
    assert expression.delete_last("123") == "12"
    assert expression.delete_last("7") == "0"
    assert expression.delete_last("0") == "0"


def test_keypad_append_replaces_lone_zero_with_digit():
    assert expression.append("0", "5") == "5"
    assert expression.append("0", "+") == "0+"
    assert expression.append("12", "3") == "123"
    assert expression.append("12", "-") == "12-"


def test_press_sequence():
    value = "0"
    for key in ["1", "2", "+", "8", "-", "="]:
        value = press(value, key)
    assert value == "20"
    assert press(value, "DEL") == "2"
    assert press(value, "C") == "0"


def test_press_unknown_key():
    with pytest.raises(ValueError):
        press("0", "*")
