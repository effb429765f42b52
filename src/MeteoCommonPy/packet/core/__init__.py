"""
パケットのコア定義
"""

from .exceptions import PacketError, ShortFrameError, MalformedRequestError
from .format import (
    StatusCode,
    MeasurementType,
    REQUEST_SIZE,
    RESPONSE_SIZE,
    CITY_FIELD_SIZE,
    CITY_MAX_LENGTH,
)

__all__ = [
    "PacketError",
    "ShortFrameError",
    "MalformedRequestError",
    "StatusCode",
    "MeasurementType",
    "REQUEST_SIZE",
    "RESPONSE_SIZE",
    "CITY_FIELD_SIZE",
    "CITY_MAX_LENGTH",
]
