from dataclasses import dataclass, field

from roman_calc.extra.types import Operator
from roman_calc.vars import OPERATORS


def default_operators():
    return OPERATORS.copy()

@dataclass
class Context:
    """
    Class representing a context
    :param operators: map from operator symbol to Operator dataclass
    """
    operators: dict[str, Operator] = field(default_factory=default_operators)
