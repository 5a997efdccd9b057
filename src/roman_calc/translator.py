import logging
import re

import roman_calc.constants as cst
from roman_calc.extra.utils import log_exception

ROMAN_NUMERAL_RE = re.compile(cst.ROMAN_NUMERAL_PATTERN, re.IGNORECASE)


def is_roman_numeral(element: str) -> bool:
    """
    Checks if element consists only of roman numeral symbols.
    No check of subtractive rules or repetitions is made
    :param element: space delimited part of expression
    :return: True if element is a numeral
    """
    return ROMAN_NUMERAL_RE.fullmatch(element) is not None


def convert_numeral_to_base_10(numeral: str) -> int:
    """
    Converts roman numeral to integer. Symbol is subtracted if the next one is greater, added otherwise,
    so malformed numerals like 'IIII' or 'VX' are converted too
    :param numeral: roman numeral
    :return: integer value of numeral
    :raises TypeError: numeral is not a string
    """
    if not isinstance(numeral, str):
        raise TypeError(f"type of numeral: {type(numeral).__name__}: does not match expected type str")
    values = [cst.NUMERAL_VALUES[symbol] for symbol in numeral.upper()]
    base_10_value = 0
    for ind, current in enumerate(values):
        if ind + 1 < len(values) and current < values[ind + 1]:
            base_10_value -= current
        else:
            base_10_value += current
    return base_10_value


class NumeralTranslator:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def translate(self, expression: str) -> str:
        """
        Replaces every roman numeral in expression with its base 10 value
        :param expression: expression with elements separated by single spaces
        :return: base 10 expression
        :raises TypeError: expression is not a string
        """
        if not isinstance(expression, str):
            raise TypeError(f"type of expression: {type(expression).__name__}: does not match expected type str")
        elements = expression.split(cst.ELEMENT_SEPARATOR)
        translated = [str(convert_numeral_to_base_10(el)) if is_roman_numeral(el) else el for el in elements]
        result = cst.ELEMENT_SEPARATOR.join(translated)
        self.logger.debug(f"translated: {expression!r} -> {result!r}")
        return result
