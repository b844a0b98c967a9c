"""计算器模块 - 表达式求值入口和批量求值"""
from .evaluator import ExpressionEvaluator, evaluate, to_postfix
from .batch import evaluate_series

__all__ = ['ExpressionEvaluator', 'evaluate', 'to_postfix', 'evaluate_series']
