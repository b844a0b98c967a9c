"""core/exceptions.py - 表达式解析与求值的错误类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""

    def __init__(self, message, position=None, token=None):
        if position is not None:
            text = f"{message} (at position {position})"
        else:
            text = message
        super().__init__(text)
        self.message = message
        self.position = position
        self.token = token


class EmptyExpression(ExpressionError):
    """输入为空或没有产生任何Token"""


class MismatchedParentheses(ExpressionError):
    """括号不匹配"""


class InvalidOperator(ExpressionError):
    """无法识别的操作符"""


class InvalidNumber(ExpressionError):
    """数字字面量无法解析"""


class NumberOutOfRange(ExpressionError):
    """数字字面量超出double范围"""


class InsufficientOperands(ExpressionError):
    """操作符可用的操作数不足2个"""


class DivisionByZero(ExpressionError):
    """除数为0"""


class MalformedExpression(ExpressionError):
    """求值结束后栈中不是恰好一个值"""
