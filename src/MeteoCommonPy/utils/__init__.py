"""
共通ユーティリティ
"""

from .config_loader import ConfigLoader
from .network import (
    parse_port,
    resolve_ipv4,
    reverse_lookup,
    send_datagram,
    receive_datagram,
    TransportError,
    AddressResolutionError,
)
from .redis_log_handler import RedisLogHandler
from .log_config import LoggerConfig, UnifiedLogFormatter, PerformanceTimer

__all__ = [
    "ConfigLoader",
    "parse_port",
    "resolve_ipv4",
    "reverse_lookup",
    "send_datagram",
    "receive_datagram",
    "TransportError",
    "AddressResolutionError",
    "RedisLogHandler",
    "LoggerConfig",
    "UnifiedLogFormatter",
    "PerformanceTimer",
]
