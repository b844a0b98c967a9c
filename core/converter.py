"""中缀表达式 -> 后缀表达式（调度场算法）"""
import logging

from core.exceptions import EmptyExpression, InvalidOperator, MismatchedParentheses
from core.token_system import (
    DECIMAL_POINT, OPERATOR_SYMBOLS, Token, TokenType, has_lower_precedence
)

logger = logging.getLogger(__name__)


class InfixConverter:
    """
    逐字符扫描中缀表达式，按调度场算法输出后缀Token序列
    https://en.wikipedia.org/wiki/Shunting_yard_algorithm

    - 数字、小数点和备用小数分隔符累积成一个数字字面量
    - 一元符号（前面不是数字或右括号）直接拼进当前字面量，不进操作符栈
    - 输出直接按后缀顺序追加，不需要最后反转
    """

    def __init__(self, alternate_decimal_separator=','):
        self.alternate_decimal_separator = alternate_decimal_separator or None

    def _is_number_char(self, ch):
        return ch.isdigit() or ch == DECIMAL_POINT or ch == self.alternate_decimal_separator

    def to_postfix(self, expression):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            后缀顺序的Token列表
        """
        if expression is None or not expression.strip():
            raise EmptyExpression("Empty expression")

        output = []
        operator_stack = []

        current_num = ''
        num_start = None
        # 上一个有效Token的类型，None表示表达式开头
        previous = None

        def flush_number():
            nonlocal current_num, num_start
            if current_num:
                output.append(Token(TokenType.NUMBER, current_num, num_start))
                current_num = ''
                num_start = None

        for i, ch in enumerate(expression):
            if self._is_number_char(ch):
                if not current_num:
                    num_start = i
                current_num += DECIMAL_POINT if ch == self.alternate_decimal_separator else ch
                previous = TokenType.NUMBER

            elif ch.isspace():
                # 空白结束一个数字字面量；只有符号的字面量继续等待数字
                if previous == TokenType.NUMBER:
                    flush_number()

            elif ch == '(':
                flush_number()
                operator_stack.append(Token(TokenType.LEFT_PAREN, ch, i))
                previous = TokenType.LEFT_PAREN

            elif ch == ')':
                flush_number()
                while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise MismatchedParentheses("Unmatched ')'", i, ch)
                operator_stack.pop()  # 丢弃左括号
                previous = TokenType.RIGHT_PAREN

            elif ch in OPERATOR_SYMBOLS:
                if previous not in (TokenType.NUMBER, TokenType.RIGHT_PAREN):
                    # 一元符号
                    if not current_num:
                        num_start = i
                    current_num += ch
                    continue

                flush_number()
                while (operator_stack
                       and operator_stack[-1].type != TokenType.LEFT_PAREN
                       and has_lower_precedence(ch, operator_stack[-1].text)):
                    output.append(operator_stack.pop())
                operator_stack.append(Token(TokenType.OPERATOR, ch, i))
                previous = TokenType.OPERATOR

            else:
                raise InvalidOperator(f"Invalid operator: {ch!r}", i, ch)

        flush_number()

        while operator_stack:
            token = operator_stack.pop()
            if token.type == TokenType.LEFT_PAREN:
                raise MismatchedParentheses("Unmatched '('", token.position, token.text)
            output.append(token)

        if not output:
            raise EmptyExpression("Expression contains no tokens")

        logger.debug(f"Postfix of {expression!r}: {' '.join(t.text for t in output)}")
        return output


def infix_to_postfix(expression, alternate_decimal_separator=','):
    """用默认设置转换表达式"""
    return InfixConverter(alternate_decimal_separator).to_postfix(expression)
