"""
サーバー側データ処理（検証・値生成）
"""

from .value_generator import ValueGenerator, VALUE_RANGES_TENTHS, value_range

__all__ = ["ValueGenerator", "VALUE_RANGES_TENTHS", "value_range"]
