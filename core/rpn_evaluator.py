"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
import math

from core.exceptions import (
    DivisionByZero, InsufficientOperands, InvalidNumber, MalformedExpression, NumberOutOfRange
)
from core.operators import Operators
from core.token_system import Operator, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def parse_number(token):
        """数字Token -> float"""
        try:
            value = float(token.text)
        except ValueError:
            raise InvalidNumber(f"Invalid number: {token.text!r}", token.position, token.text) from None
        if math.isinf(value):
            raise NumberOutOfRange(f"Number out of range: {token.text!r}", token.position, token.text)
        return value

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: 后缀顺序的Token列表（左操作数、右操作数、操作符）
        Returns:
            float结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(RPNEvaluator.parse_number(token))

            elif token.type == TokenType.OPERATOR:
                op = Operator.from_symbol(token.text, token.position)
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.text}")
                    raise InsufficientOperands(
                        f"Not enough operands for '{token.text}'", token.position, token.text
                    )
                operand2 = stack.pop()
                operand1 = stack.pop()
                try:
                    stack.append(Operators.apply(op, operand1, operand2))
                except DivisionByZero:
                    raise DivisionByZero("Division by zero", token.position, token.text) from None

            else:
                # 括号不应出现在后缀序列中
                raise MalformedExpression(
                    f"Unexpected token in postfix sequence: {token.text!r}", token.position, token.text
                )

        if len(stack) == 0:
            raise MalformedExpression("Empty stack after evaluation")
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpression(f"Too many operands: {len(stack)} values left on the stack")

        return stack[0]
