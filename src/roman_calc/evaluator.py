import logging

from roman_calc.extra.context_type import Context
from roman_calc.extra.types import Leaf, Node, OperatorNode
from roman_calc.extra.utils import log_exception


class Evaluator:
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx or Context()
        self.logger = logger or logging.getLogger(__name__)

    def _visit(self, root: Node) -> int | float:
        """
        Post-order walk with explicit stacks, left subtree before right one
        """
        values: list[int | float] = []
        stack: list[tuple[Node, bool]] = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if isinstance(node, Leaf):
                values.append(node.value)
            elif isinstance(node, OperatorNode):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self.ctx.operators[node.symbol].callable_function(left, right))
                else:
                    stack.extend(((node, True), (node.right, False), (node.left, False)))
            else:
                raise TypeError(f"Unknown node type: {type(node).__name__}")
        return values[0]

    @log_exception
    def evaluate(self, root: Node) -> int | float:
        """
        Calculates value of the expression tree, children first
        :param root: root of the tree made by Parser
        :return: value of the tree. Division by zero gives inf or nan
        """
        result = self._visit(root)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"{result=}")
        return result
