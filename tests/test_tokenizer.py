import pytest

from roman_calc.extra.exceptions import InvalidTokenError
from roman_calc.extra.types import Digit, LeftParen, OperatorToken, RightParen
from roman_calc.tokenizer import Tokenizer


def test_digits_are_coalesced():
    assert Tokenizer().tokenize("123+45") == [Digit("123"), OperatorToken("+"), Digit("45")]


def test_parenthesis_and_whitespaces():
    tokens = Tokenizer().tokenize(" ( 1 *20)/ 3")
    assert tokens == [LeftParen(), Digit("1"), OperatorToken("*"), Digit("20"), RightParen(),
                      OperatorToken("/"), Digit("3")]


def test_positions():
    tokens = Tokenizer().tokenize("10 + (2)")
    assert [t.position for t in tokens] == [0, 3, 5, 6, 7]


def test_digit_value():
    assert Tokenizer().tokenize("0042")[0].value == 42


def test_empty_expression():
    assert Tokenizer().tokenize("   ") == []


@pytest.mark.parametrize("expression, position",
    [
        ("2^3", 1),
        ("IV+1", 0),
        ("5,4", 1),
        ("1 + x", 4),
        ("2.5*2", 1),
    ]
)
def test_unknown_token(expression, position):
    with pytest.raises(InvalidTokenError) as exc_info:
        Tokenizer().tokenize(expression)
    assert exc_info.value.exc_type == "unknown_token"
    assert exc_info.value.position == position


def test_number_with_too_many_digits():
    with pytest.raises(InvalidTokenError) as exc_info:
        Tokenizer().tokenize("1+" + "9" * 5000)
    assert exc_info.value.exc_type == "invalid_token"
    assert exc_info.value.position == 2


def test_longest_allowed_number():
    tokens = Tokenizer().tokenize("9" * 4300)
    assert tokens[0].value == 10 ** 4300 - 1
