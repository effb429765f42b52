"""
環境変数の読み込みヘルパー (.env 対応)
"""
from __future__ import annotations
import os
from dotenv import load_dotenv

load_dotenv()


def get(key: str, default=None, cast=None):
    value = os.getenv(key)
    if value is None or value == "":
        return default
    if cast is int:
        try:
            return int(value)
        except ValueError:
            return default
    if cast is float:
        try:
            return float(value)
        except ValueError:
            return default
    return value
