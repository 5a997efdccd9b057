import logging

from roman_calc.evaluator import Evaluator
from roman_calc.extra.context_type import Context
from roman_calc.extra.utils import log_exception
from roman_calc.parser import Parser
from roman_calc.tokenizer import Tokenizer
from roman_calc.translator import NumeralTranslator


class Calculator:

    """
    Class for running an expression through translation, tokenizing, parsing and evaluation
    :param ctx: Context
    """
    def __init__(self, *, ctx: Context | None = None):
        self.ctx: Context = ctx or Context()
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"ctx: {self.ctx}")

    @log_exception
    def calc(self, expression: str) -> int | float:
        """
        Calculates value of the expression
        :param expression: expression with integers, roman numerals, '+-*/' and parenthesis
        :return: value of expression
        """
        self.logger.debug(f"expression: {expression}")
        translated = NumeralTranslator(logger=self.logger).translate(expression)
        tokens = Tokenizer(ctx=self.ctx, logger=self.logger).tokenize(translated)
        tree = Parser(ctx=self.ctx, logger=self.logger).parse(tokens)
        return Evaluator(ctx=self.ctx, logger=self.logger).evaluate(tree)
