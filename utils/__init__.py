"""工具模块"""
from .formatting import format_postfix, format_result

__all__ = ['format_postfix', 'format_result']
