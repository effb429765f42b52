"""
Meteo クライアントパッケージ
"""

from .client import Client, ServerConfig, WeatherResult
from .formatter import format_response
from .request_parser import parse_request_line


# バージョン情報
__version__ = "1.0.0"

__all__ = [
    "Client",
    "ServerConfig",
    "WeatherResult",
    "format_response",
    "parse_request_line",
]
