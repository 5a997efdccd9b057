from typing import Literal


class InvalidTokenError(ValueError):
    def __init__(self, message, exc_type: Literal["unknown_token", "invalid_token"], position: int | None = None):
        super().__init__(message)
        self.exc_type = exc_type
        self.position = position


class ExpressionSyntaxError(SyntaxError):
    """
    Structural error in an expression
    :param position: index of the offending token in the translated expression, if known
    """
    def __init__(self, message, position: int | None = None):
        super().__init__(message)
        self.position = position


class InvalidParenthesisError(ExpressionSyntaxError):
    def __init__(self, message, exc_type: Literal["unbalanced"], position: int | None = None):
        super().__init__(message, position)
        self.exc_type = exc_type
