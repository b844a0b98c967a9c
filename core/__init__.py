"""核心模块 - Token系统、调度场转换器、RPN评估器和操作符"""
from .exceptions import (
    ExpressionError, EmptyExpression, MismatchedParentheses, InvalidOperator,
    InvalidNumber, NumberOutOfRange, InsufficientOperands, DivisionByZero,
    MalformedExpression
)
from .token_system import (
    TokenType, Token, Operator, OperatorProperty, OPERATOR_PROPERTIES,
    has_lower_precedence
)
from .converter import InfixConverter, infix_to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'ExpressionError', 'EmptyExpression', 'MismatchedParentheses', 'InvalidOperator',
    'InvalidNumber', 'NumberOutOfRange', 'InsufficientOperands', 'DivisionByZero',
    'MalformedExpression',
    'TokenType', 'Token', 'Operator', 'OperatorProperty', 'OPERATOR_PROPERTIES',
    'has_lower_precedence',
    'InfixConverter', 'infix_to_postfix', 'RPNEvaluator', 'Operators'
]
