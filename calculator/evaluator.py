import logging
from collections import OrderedDict
from typing import List, Optional

from core import InfixConverter, RPNEvaluator, Token
from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size: Optional[int] = None,
                 alternate_decimal_separator: Optional[str] = None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        if alternate_decimal_separator is None:
            alternate_decimal_separator = EVALUATOR_CONFIG['alternate_decimal_separator']
        self.converter = InfixConverter(alternate_decimal_separator)
        self.rpn_evaluator = RPNEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存，只缓存成功的结果
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def to_postfix(self, expression: str) -> List[Token]:
        return self.converter.to_postfix(expression)

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            float结果；出错时抛出ExpressionError的子类
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1

        postfix = self.to_postfix(expression)
        result = self.rpn_evaluator.evaluate(postfix)
        logger.debug(f"{expression!r} = {result!r}")

        if self.cache_size > 0:
            self._result_cache[expression] = result
            self._manage_cache()
        return result


def to_postfix(expression: str) -> List[Token]:
    """中缀表达式 -> 后缀Token列表"""
    return InfixConverter(EVALUATOR_CONFIG['alternate_decimal_separator']).to_postfix(expression)


def evaluate(expression: str) -> float:
    """计算中缀表达式的值（无缓存、无共享状态）"""
    return RPNEvaluator.evaluate(to_postfix(expression))
