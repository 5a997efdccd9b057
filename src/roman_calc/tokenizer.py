import logging

import roman_calc.constants as cst
from roman_calc.extra.context_type import Context
from roman_calc.extra.exceptions import InvalidTokenError
from roman_calc.extra.types import Digit, LeftParen, OperatorToken, RightParen, Token
from roman_calc.extra.utils import log_exception


class Tokenizer:
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx or Context()
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def tokenize(self, expression: str) -> list[Token]:
        """
        Tokenizes the expression
        :param expression: base 10 expression(after numerals translation), whitespaces are ignored
        :return: list of tokens
        :raises InvalidTokenError: symbol is neither digit, operator nor parenthesis, or number has too many digits
        """
        op_map = self.ctx.operators
        tokens: list[Token] = []
        digits_buffer: list[str] = []
        buffer_start = 0

        def flush_digits():
            if digits_buffer:
                if len(digits_buffer) > cst.MAXIMUM_DIGITS:
                    raise InvalidTokenError(
                        f"Number at position {buffer_start} has {len(digits_buffer)} digits out of maximum of {cst.MAXIMUM_DIGITS}",
                        exc_type="invalid_token", position=buffer_start)
                tokens.append(Digit("".join(digits_buffer), buffer_start))
                digits_buffer.clear()

        for ind, s in enumerate(expression):
            if s.isspace():
                continue  # digits split by whitespaces are one number
            if s in cst.DIGITS:
                if not digits_buffer:
                    buffer_start = ind
                digits_buffer.append(s)
                continue

            flush_digits()
            if s in op_map:
                tokens.append(OperatorToken(s, ind))
            elif s == cst.LEFT_PARENTHESIS:
                tokens.append(LeftParen(ind))
            elif s == cst.RIGHT_PARENTHESIS:
                tokens.append(RightParen(ind))
            else:
                raise InvalidTokenError(f"Unknown token: '{s}' at position {ind}", exc_type="unknown_token",
                                        position=ind)
        flush_digits()

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"{tokens=}")
        return tokens
