import math
from functools import wraps

from roman_calc.extra.types import Operator


def sign(number: int | float) -> float:
    if isinstance(number, float):
        return math.copysign(1, number)
    return -1.0 if number < 0 else 1.0


def as_float(number: int | float) -> float:
    """
    Converts number to float, integers out of float range become inf or -inf
    """
    try:
        return float(number)
    except OverflowError:
        return sign(number) * math.inf


def overflow_to_float(func):

    """Decorator to retry operation on floats when an integer operand or result is out of float range"""

    @wraps(func)
    def wrapper(x, y):
        try:
            return func(x, y)
        except OverflowError:
            return func(as_float(x), as_float(y))

    return wrapper


@overflow_to_float
def divide(x: int | float, y: int | float) -> float:
    """
    True division with floating-point semantics for a zero divisor
    :param x: dividend
    :param y: divisor
    :return: x / y, or inf, -inf, nan when y is zero
    """
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or x != x:  # nan
            return math.nan
        return sign(x) * sign(y) * math.inf


OPERATORS: dict[str, Operator] = {
        "+": Operator(14, overflow_to_float(lambda x, y: x + y), False),
        "-": Operator(14, overflow_to_float(lambda x, y: x - y), False),
        "*": Operator(15, overflow_to_float(lambda x, y: x * y), False),
        "/": Operator(15, divide, False),
    }
