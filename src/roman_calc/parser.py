import logging

from roman_calc.extra.context_type import Context
from roman_calc.extra.exceptions import ExpressionSyntaxError, InvalidParenthesisError
from roman_calc.extra.types import Digit, LeftParen, Leaf, Node, OperatorNode, OperatorToken, RightParen, Token
from roman_calc.extra.utils import log_exception


class Parser:
    """
    Shunting-yard parser building a binary expression tree
    :param ctx: Context with operators table
    """
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx or Context()
        self.logger = logger or logging.getLogger(__name__)

    def _should_pop(self, top: OperatorToken | LeftParen, current: OperatorToken) -> bool:
        """
        Checks if operator on top of the stack binds before the current one
        """
        if not isinstance(top, OperatorToken):
            return False
        top_op = self.ctx.operators[top.symbol]
        cur_op = self.ctx.operators[current.symbol]
        if cur_op.is_right:
            return top_op.priority > cur_op.priority
        return top_op.priority >= cur_op.priority

    @staticmethod
    def _add_node(output: list[Node], operator: OperatorToken) -> None:
        if len(output) < 2:
            raise ExpressionSyntaxError(
                f"Unfinished line: operation '{operator.symbol}' at position {operator.position} has no second operand",
                position=operator.position)
        right = output.pop()
        left = output.pop()
        output.append(OperatorNode(operator.symbol, left, right))

    @log_exception
    def parse(self, tokens: list[Token]) -> Node:
        """
        Converts list of tokens to expression tree
        :param tokens: tokens made by Tokenizer
        :return: root of the tree
        :raises InvalidParenthesisError: unbalanced parenthesis
        :raises ExpressionSyntaxError: missing operands or operators
        """
        stack_ops: list[OperatorToken | LeftParen] = []
        output: list[Node] = []

        for t in tokens:
            if isinstance(t, Digit):
                output.append(Leaf(t.value))
            elif isinstance(t, OperatorToken):
                while stack_ops and self._should_pop(stack_ops[-1], t):
                    self._add_node(output, stack_ops.pop())  # type: ignore
                stack_ops.append(t)
            elif isinstance(t, LeftParen):
                stack_ops.append(t)
            elif isinstance(t, RightParen):
                while stack_ops and not isinstance(stack_ops[-1], LeftParen):
                    self._add_node(output, stack_ops.pop())  # type: ignore
                if not stack_ops:
                    raise InvalidParenthesisError(f"Unbalanced parenthesis: ')' at position {t.position} is not opened",
                                                  exc_type="unbalanced", position=t.position)
                stack_ops.pop()
            else:
                raise TypeError(f"Unknown token type: {t!r}")

        while stack_ops:
            op = stack_ops.pop()
            if isinstance(op, LeftParen):
                raise InvalidParenthesisError(f"Unbalanced parenthesis: '(' at position {op.position} is not closed",
                                              exc_type="unbalanced", position=op.position)
            self._add_node(output, op)

        if len(output) != 1:
            if not output:
                raise ExpressionSyntaxError("Empty expression")
            raise ExpressionSyntaxError(f"Missed operation between operands: {len(output)} values left")

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"rpn: {' '.join(output[0].to_postfix())}")
        return output[0]
