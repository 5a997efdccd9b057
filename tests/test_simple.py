import math

import pytest

from roman_calc.calculator import Calculator


@pytest.mark.parametrize(
    "expression",
    [
        "1+4",
        "10-100",
        "5*7*8",
        "5*(7-3)",
        "2+3*4",
        "(2+3)*4",
        "4-2-1",
        "100/4/5",
        "8-3+2",
        "2*(3+(4-1))*2",
        "((((7))))",
        " 12 * ( 3 + 4 ) ",
        "7/2",
    ]
)
def test_simple_ok(expression):
    assert Calculator().calc(expression) == eval(expression)


@pytest.mark.parametrize("expression, result",
    [
        ("4-2-1", 1),
        ("2+3*4", 14),
        ("(2+3)*4", 20),
        ("8/2/2", 2),
        ("123+45", 168),
        ("1 2+3", 15),
    ]
)
def test_precedence_and_grouping(expression, result):
    assert Calculator().calc(expression) == result


@pytest.mark.parametrize("expression, result",
    [
        ("1/0", math.inf),
        ("(0-1)/0", -math.inf),
        ("1/(0/(0-5))", -math.inf),
    ]
)
def test_division_by_zero_is_infinite(expression, result):
    assert Calculator().calc(expression) == result


def test_zero_by_zero_is_nan():
    assert math.isnan(Calculator().calc("0/0"))


def test_nan_propagates():
    assert math.isnan(Calculator().calc("0/0+1"))


HUGE = "1" + "0" * 400


@pytest.mark.parametrize("expression, result",
    [
        (f"{HUGE}/3", math.inf),
        (f"{HUGE}/0", math.inf),
        (f"{HUGE}*1/7", math.inf),
        (f"(0-{HUGE})/3", -math.inf),
        (f"(0-{HUGE})/0", -math.inf),
        (f"1/2*{HUGE}", math.inf),
        (f"{HUGE}/(1/2)", math.inf),
        (f"{HUGE}/(0/1)", math.inf),
        (f"1/2+{HUGE}", math.inf),
        (f"3/{HUGE}", 0),
    ]
)
def test_numbers_out_of_float_range(expression, result):
    assert Calculator().calc(expression) == result


def test_out_of_float_range_divided_by_itself_is_nan():
    assert math.isnan(Calculator().calc(f"{HUGE}/(1/2)/({HUGE}/(1/2))"))


def test_big_integers_stay_exact():
    assert Calculator().calc(f"{HUGE}*{HUGE}-{HUGE}") == 10 ** 800 - 10 ** 400


@pytest.mark.parametrize("expression, result",
    [
        ("+".join(["1"] * 1500), 1500),
        ("-".join(["3000"] + ["1"] * 1499), 1501),
        ("*".join(["1"] * 1500) + "+" + "/".join(["2"] * 3), 1.5),
    ]
)
def test_long_chains(expression, result):
    assert Calculator().calc(expression) == result


def test_number_without_operators():
    assert Calculator().calc("42") == 42
    assert Calculator().calc("XLII") == 42
