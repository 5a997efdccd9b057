from dataclasses import dataclass, field
from typing import Callable, Union


@dataclass
class Operator:
    """
    Class representing an operator
    :param priority: priority of operator
    :param callable_function: function that will be called when met in expression(left and right operands passed as arguments)
    :param is_right: is operator right associative
    """
    priority: float
    callable_function: Callable
    is_right: bool = False


@dataclass(frozen=True)
class Digit:
    """
    Number literal: one or more digit characters
    :param text: the digits as written
    :param position: index of the first digit in the expression
    """
    text: str
    position: int = field(default=0, compare=False)

    @property
    def value(self) -> int:
        return int(self.text)


@dataclass(frozen=True)
class OperatorToken:
    symbol: str
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class LeftParen:
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RightParen:
    position: int = field(default=0, compare=False)


Token = Union[Digit, OperatorToken, LeftParen, RightParen]


@dataclass
class Leaf:
    value: int | float

    def to_postfix(self) -> list[str]:
        return [str(self.value)]


@dataclass
class OperatorNode:
    """
    Inner node of the expression tree
    :param symbol: operator symbol, key of the operator table
    :param left: left operand subtree
    :param right: right operand subtree
    """
    symbol: str
    left: "Node"
    right: "Node"

    def to_postfix(self) -> list[str]:
        """
        Renders the subtree in reverse polish notation
        :return: list of operands and operator symbols
        """
        postfix: list[str] = []
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, children_done = stack.pop()
            if isinstance(node, Leaf):
                postfix.append(str(node.value))
            elif children_done:
                postfix.append(node.symbol)
            else:
                stack.extend(((node, True), (node.right, False), (node.left, False)))
        return postfix


Node = Union[Leaf, OperatorNode]
