"""数据加载模块 - 从文件读取表达式"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def load_expressions(file_path, column='expression'):
    """
    从文件加载表达式。

    Parameters:
    - file_path: CSV文件（按列名读取）或纯文本文件（每行一个表达式）
    - column: CSV中表达式所在列名称, 默认为 'expression'

    Returns:
    - 表达式的Series（dtype为object）
    """
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 表达式可能含有 ',' 作为小数分隔符，所有列按字符串读取
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if column not in dataset.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = dataset[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        # 跳过空行和 '#' 注释
        expressions = pd.Series(
            [line for line in lines if line and not line.startswith('#')],
            dtype=object,
            name=column,
        )

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions.reset_index(drop=True)
