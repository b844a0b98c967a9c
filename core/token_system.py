"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from core.exceptions import InvalidOperator


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * / ^
    LEFT_PAREN = "left_paren"  # (
    RIGHT_PAREN = "right_paren"  # )


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    position: Optional[int] = None  # 在原表达式中的起始位置

    def __str__(self):
        return self.text


class OperatorProperty(NamedTuple):
    priority: int
    left_associative: bool


# 操作符优先级与结合性（只读常量）
OPERATOR_PROPERTIES = {
    '+': OperatorProperty(1, True),
    '-': OperatorProperty(1, True),
    '*': OperatorProperty(2, True),
    '/': OperatorProperty(2, True),
    '^': OperatorProperty(3, False),  # 右结合
}

OPERATOR_SYMBOLS = frozenset(OPERATOR_PROPERTIES)
DECIMAL_POINT = '.'


class Operator(Enum):
    ADDITION = '+'
    SUBTRACTION = '-'
    MULTIPLICATION = '*'
    DIVISION = '/'
    EXPONENTIATION = '^'

    @classmethod
    def from_symbol(cls, symbol, position=None):
        """操作符符号 -> Operator枚举，未知符号抛出InvalidOperator"""
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperator(f"Invalid operator: {symbol!r}", position, symbol) from None


def get_operator_property(symbol, position=None):
    try:
        return OPERATOR_PROPERTIES[symbol]
    except KeyError:
        raise InvalidOperator(f"Invalid operator: {symbol!r}", position, symbol) from None


def has_lower_precedence(op1, op2):
    """
    判断op1相对op2是否优先级更低（同优先级时看op1是否左结合）
    为True时，栈顶的op2应先弹出到输出
    """
    prop1 = get_operator_property(op1)
    prop2 = get_operator_property(op2)
    if prop1.priority == prop2.priority:
        return prop1.left_associative
    return prop1.priority < prop2.priority

