'''
    File Name: expression.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Keypad arithmetic. Expressions are integer sums and
    differences only, evaluated left to right without eval().
'''
import logging
import re
from typing import List, Union

from engine.errors import InvalidAmountError, MalformedExpressionError

logger = logging.getLogger(__name__)

OPERATORS = ("+", "-")
DIGITS = "0123456789"
CLEAR_KEY = "C"
DELETE_KEY = "DEL"
EQUALS_KEY = "="

_DISALLOWED = re.compile(r"[^0-9+\-]")
_TOKEN = re.compile(r"\d+|[+\-]")


def _tokenize(expr: str) -> List[str]:
    tokens = _TOKEN.findall(expr)
    if "".join(tokens) != expr:
        raise MalformedExpressionError(f"Unexpected characters in {expr!r}")
    return tokens


def _sum_tokens(tokens: List[str]) -> int:
    """Fold `[sign] n (op n)*` left to right."""
    if not tokens:
        raise MalformedExpressionError("Empty expression")

    pos = 0
    sign = 1
    if tokens[0] in OPERATORS:
        sign = -1 if tokens[0] == "-" else 1
        pos = 1

    expect_number = True
    result = 0
    for tok in tokens[pos:]:
        if expect_number:
            if not tok.isdigit():
                raise MalformedExpressionError(f"Expected a number, got {tok!r}")
            result += sign * int(tok)
        else:
            if tok not in OPERATORS:
                raise MalformedExpressionError(f"Expected an operator, got {tok!r}")
            sign = -1 if tok == "-" else 1
        expect_number = not expect_number

    if expect_number:
        # ended on an operator (or a lone sign)
        raise MalformedExpressionError("Expression ends with an operator")
    return result


def evaluate(expr: str) -> str:
    """Collapse a keypad expression such as "1200+300" into "1500".

    Characters other than digits, + and - are dropped first and one
    trailing operator is ignored. Empty input gives "0". If what is left
    cannot be parsed (including input with nothing numeric in it) the
    original input is returned unchanged.
    """
    if not expr:
        return "0"
    sanitized = _DISALLOWED.sub("", expr)
    if not sanitized:
        return expr
    if sanitized[-1] in OPERATORS:
        sanitized = sanitized[:-1]
    try:
        return str(_sum_tokens(_tokenize(sanitized)))
    except (MalformedExpressionError, ValueError):
        # ValueError: int() refuses numbers past the interpreter digit limit
        logger.debug("Could not evaluate %r; keeping input", expr)
        return expr


def parse_amount(value: Union[int, str]) -> int:
    """Resolve keypad input (or an int) into a positive whole amount."""
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if isinstance(value, int):
        amount = value
    else:
        resolved = evaluate(str(value))
        try:
            amount = int(resolved)
        except ValueError:
            raise InvalidAmountError(f"Amount is not numeric: {value!r}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive: {amount}")
    return amount


# --- Keypad primitives on the running input string ---

def clear() -> str:
    return "0"


def delete_last(current: str) -> str:
    """Remove the last character; never goes below "0"."""
    return current[:-1] if len(current) > 1 else "0"


def equals(current: str) -> str:
    return evaluate(current)


def append(current: str, token: str) -> str:
    """Append a digit or operator; a digit replaces a lone "0"."""
    if current == "0" and token not in OPERATORS:
        return token
    return current + token


def press(current: str, key: str) -> str:
    """Apply one keypad key (digit, +, -, C, DEL or =) to the input string."""
    if key == CLEAR_KEY:
        return clear()
    if key == DELETE_KEY:
        return delete_last(current)
    if key == EQUALS_KEY:
        return equals(current)
    if key in OPERATORS or (key and all(ch in DIGITS for ch in key)):
        return append(current, key)
    raise ValueError(f"Unknown keypad key: {key!r}")
