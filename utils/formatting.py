"""utils/formatting.py"""
import math


def format_postfix(token_sequence, separator=' '):
    """把后缀Token序列输出为字符串，例如 '2 3 4 * +'"""
    return separator.join(str(token) for token in token_sequence)


def format_result(value, precision=12):
    """按有效数字格式化结果；整数值不带小数点"""
    value = float(value)
    if math.isnan(value):
        return 'nan'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer() and abs(value) < 10 ** precision:
        return str(int(value))
    return f"{value:.{precision}g}"
