"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "alternate_decimal_separator": ",",  # 备用小数分隔符，会被替换为 '.'
    "cache_size": 1000,  # 结果缓存条目上限，0 表示不缓存
}

# 输出参数
OUTPUT_CONFIG = {
    "precision": 12,  # 显示结果时的有效数字
    "expression_column": "expression",  # CSV文件中表达式所在列
    "output_path": "results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

RESERVED_CHARS = set("0123456789.+-*/^()")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    separator = EVALUATOR_CONFIG["alternate_decimal_separator"]
    if separator:
        assert len(separator) == 1, "备用小数分隔符必须是单个字符"
        assert separator not in RESERVED_CHARS, "备用小数分隔符不能是数字、操作符、括号或 '.'"
        assert not separator.isspace(), "备用小数分隔符不能是空白"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "cache_size 不能为负"
    assert OUTPUT_CONFIG["precision"] > 0, "precision 必须为正"
