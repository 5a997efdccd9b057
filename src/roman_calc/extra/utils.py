import math
from functools import wraps


def check_is_integer(number: int | float) -> bool:
    if isinstance(number, int):
        return True
    return math.isfinite(number) and number.as_integer_ratio()[1] == 1


def format_result(number: int | float) -> int | float:
    """
    Shows whole float results as integers
    :param number: evaluated value
    :return: int if number has no fractional part, number itself otherwise
    """
    if check_is_integer(number):
        return int(number)
    return number


def log_exception(func):

    """Decorator to automatically log exceptions with traceback at debug level"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.debug(f"Exception in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
