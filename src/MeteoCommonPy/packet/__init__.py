"""
Meteo Packet - 気象データ照会プロトコルのパケット実装

1往復のUDPデータグラムでやり取りする固定長バイナリフレームを提供します。

- WeatherRequest: クライアント -> サーバー (65バイト)
- WeatherResponse: サーバー -> クライアント (9バイト)
"""

from .core.exceptions import PacketError, ShortFrameError, MalformedRequestError
from .core.format import (
    StatusCode,
    MeasurementType,
    REQUEST_SIZE,
    RESPONSE_SIZE,
    CITY_FIELD_SIZE,
    CITY_MAX_LENGTH,
)
from .models.request import WeatherRequest
from .models.response import WeatherResponse

__version__ = "1.0.0"
__all__ = [
    # 例外
    "PacketError",
    "ShortFrameError",
    "MalformedRequestError",
    # 定義
    "StatusCode",
    "MeasurementType",
    "REQUEST_SIZE",
    "RESPONSE_SIZE",
    "CITY_FIELD_SIZE",
    "CITY_MAX_LENGTH",
    # パケット
    "WeatherRequest",
    "WeatherResponse",
]
