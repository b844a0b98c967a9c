"""批量求值 - 对一列表达式逐行求值，失败行记为NaN"""
import logging

import numpy as np
import pandas as pd

from core import ExpressionError
from calculator.evaluator import ExpressionEvaluator
from utils.formatting import format_postfix

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'postfix', 'result', 'error']


def evaluate_series(expressions, evaluator=None):
    """
    Args:
        expressions: 表达式的Series或列表
        evaluator: ExpressionEvaluator实例，默认新建一个
    Returns:
        DataFrame，列为 expression / postfix / result / error，索引与输入一致
    """
    if evaluator is None:
        evaluator = ExpressionEvaluator()
    if not isinstance(expressions, pd.Series):
        expressions = pd.Series(list(expressions), dtype=object)

    rows = []
    for expression in expressions:
        # 缺失值按空表达式处理
        if not isinstance(expression, str):
            expression = '' if pd.isna(expression) else str(expression)
        postfix = ''
        try:
            tokens = evaluator.to_postfix(expression)
            postfix = format_postfix(tokens)
            result = evaluator.evaluate(expression)
            error = None
        except ExpressionError as e:
            logger.warning(f"Error evaluating expression '{expression[:50]}': {type(e).__name__}: {e}")
            result = np.nan
            error = f"{type(e).__name__}: {e}"
        rows.append({'expression': expression, 'postfix': postfix, 'result': result, 'error': error})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=expressions.index)
    n_failed = results['error'].notna().sum()
    if n_failed:
        logger.info(f"Evaluated {len(results)} expressions, {n_failed} failed")
    return results
