import logging
import math
import operator

import numpy as np

from backend.config import MAX_DIGITS
from backend.models import Operator

logger = logging.getLogger(__name__)


class EvalError(ArithmeticError):
    pass


_BINARY_OPS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


def parse_number(text: str) -> float:
    """
    Convert display text to a float. Text that is not a number (an empty
    string, a lone '-', a half-typed exponent) counts as zero.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def is_zero(text: str) -> bool:
    return parse_number(text) == 0


def format_number(value, max_length: int = MAX_DIGITS) -> str:
    """
    Render a result as the shortest decimal text that fits the display.

    Plain notation is tried first; numbers of magnitude >= 1 then lose
    fractional digits, and anything still too long falls back to scientific
    notation with decreasing precision.
    """
    value = np.float64(value)
    if not np.isfinite(value):
        raise EvalError("Result out of range")
    if value == 0:
        return "0"

    text = np.format_float_positional(value, trim="-")
    if len(text) <= max_length:
        return text

    if abs(value) >= 1 and "." in text:
        int_len = len(text.split(".")[0])
        for precision in range(max_length - int_len - 1, -1, -1):
            text = np.format_float_positional(value, precision=precision, trim="-")
            if len(text) <= max_length:
                return text

    for precision in range(max_length, -1, -1):
        text = np.format_float_scientific(value, precision=precision, trim="-")
        if len(text) <= max_length:
            return text
    raise EvalError(f"Result does not fit in {max_length} characters")


def factorial(value: float) -> np.float64:
    """
    Factorial of the nearest integer to |value|, as a double.
    0! and anything that rounds to 0 give 1.
    """
    n = math.floor(abs(value) + 0.5)
    result = np.float64(1)
    with np.errstate(over="raise"):
        try:
            for i in range(1, n + 1):
                result = result * i
        except FloatingPointError:
            raise EvalError(f"Factorial of {n} is out of range")
    return result


def evaluate(a_text: str, b_text: str, op: Operator, max_length: int = MAX_DIGITS) -> str:
    """
    Apply `op` to two operands given as display text and return the result
    as display text. Unary operators only look at the first operand.

    Raises EvalError on division by zero, square root of a negative number,
    or a result outside double range.
    """
    if not a_text or not b_text:
        return "0"

    a = np.float64(parse_number(a_text))
    b = np.float64(parse_number(b_text))

    with np.errstate(over="raise", invalid="raise", divide="raise"):
        try:
            if op in _BINARY_OPS:
                if op is Operator.DIVIDE and b == 0:
                    raise EvalError("Division by zero")
                result = _BINARY_OPS[op](a, b)
            elif op is Operator.SQUARE_ROOT:
                result = np.sqrt(a)
            elif op is Operator.FACTORIAL:
                result = factorial(a)
            else:
                return "0"
        except FloatingPointError as e:
            raise EvalError(str(e))

    text = format_number(result, max_length)
    logger.debug("evaluate(%r, %r, %s) -> %r", a_text, b_text, op.name, text)
    return text


# Quick local demo
if __name__ == "__main__":
    print(evaluate("5", "3", Operator.ADD))
    print(evaluate("1", "3", Operator.DIVIDE))
    print(evaluate("5", "5", Operator.FACTORIAL))
    print(evaluate("2", "2", Operator.SQUARE_ROOT))
