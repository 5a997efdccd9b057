import logging
import os
import string

FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = os.path.join(os.path.expanduser("~"), ".roman_calc", "roman_calc.log")
LOG_LEVEL = logging.INFO  # console: results and errors only
LOG_FILE_LEVEL = logging.DEBUG

QUIT_COMMAND = "q"

MAXIMUM_DIGITS = 4300  # default limit of int() on decimal strings

NUMERAL_VALUES: dict[str, int] = {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }

ROMAN_NUMERAL_PATTERN = "^[" + "".join(reversed(NUMERAL_VALUES.keys())) + "]+$"  # ^[MDCLXVI]+$
ELEMENT_SEPARATOR = " "

DIGITS = string.digits
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"
