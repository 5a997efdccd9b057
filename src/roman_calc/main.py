import logging
import os
import sys
from sys import stdout

import roman_calc.constants as cst
from roman_calc.calculator import Calculator
from roman_calc.extra.utils import format_result

logger = logging.getLogger(__name__)


def calc(expression: str) -> int | float:
    """
    Calculates expression and shows whole results as integers
    :param expression: expression to calculate
    :return: value of expression
    """
    return format_result(Calculator().calc(expression))


def make_handlers() -> list[logging.Handler]:
    """
    Creates handlers: full debug log to LOG_FILE, results and errors to stdout
    :return: list of handlers
    """
    log_dir = os.path.dirname(cst.LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    file_handler = logging.FileHandler(cst.LOG_FILE, mode="a", encoding="utf-8", delay=True)
    file_handler.setLevel(cst.LOG_FILE_LEVEL)
    stream_handler = logging.StreamHandler(stdout)
    stream_handler.setLevel(cst.LOG_LEVEL)
    return [file_handler, stream_handler]


def setup_logging():
    logging.basicConfig(
        level=min(cst.LOG_LEVEL, cst.LOG_FILE_LEVEL),
        handlers=make_handlers(),
        format=cst.FORMAT
    )


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for application. Calculates expression passed as arguments,
    or reads expressions from stdin when there are none
    :return: exit code
    """
    setup_logging()
    args = sys.argv[1:] if argv is None else argv
    if args:
        expression = " ".join(args)
        try:
            logger.info(f"{expression} = {calc(expression)}")
        except (SyntaxError, ValueError, TypeError, ArithmeticError) as e:
            logger.error(f"Could not calculate expression {expression}: {e}")
            return 1
        return 0

    while True:
        try:
            expression = input(f"Enter the expression to calculate({cst.QUIT_COMMAND} to exit): ")
        except EOFError:
            return 0
        if expression == cst.QUIT_COMMAND:
            return 0
        try:
            logger.info(f"{expression} = {calc(expression)}")
        except (SyntaxError, ValueError, TypeError, ArithmeticError) as e:
            logger.error(f"Could not calculate expression {expression}: {e}")


if __name__ == "__main__":
    sys.exit(main())
