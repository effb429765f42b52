"""
Meteo 共通パッケージ (パケット定義・ユーティリティ)
"""

__version__ = "1.0.0"
