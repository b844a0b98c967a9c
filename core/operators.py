"""core/operators.py"""
import logging

import numpy as np

from core.exceptions import DivisionByZero, InvalidOperator
from core.token_system import Operator

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，统一按float64（IEEE 754）计算"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数为0时抛出DivisionByZero"""
        if operand2 == 0.0:
            raise DivisionByZero("Division by zero")
        with np.errstate(all='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def pow(operand1, operand2):
        """
        乘方操作符：np.power保持IEEE 754语义
        溢出得到inf，负数的分数次幂得到nan（Python的**会抛OverflowError或返回复数）
        """
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def apply(op, operand1, operand2):
        """对左操作数operand1和右操作数operand2应用op"""
        op_method = _OPERATOR_METHODS.get(op)
        if op_method is None:
            logger.error(f"Unknown binary operator: {op}")
            raise InvalidOperator(f"Invalid operator: {op!r}", token=str(op))
        return float(op_method(operand1, operand2))


_OPERATOR_METHODS = {
    Operator.ADDITION: Operators.add,
    Operator.SUBTRACTION: Operators.sub,
    Operator.MULTIPLICATION: Operators.mul,
    Operator.DIVISION: Operators.div,
    Operator.EXPONENTIATION: Operators.pow,
}
