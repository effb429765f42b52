"""
固定長フレームの定義

リクエスト (65バイト):
 0      : type  (1バイト, 't' / 'h' / 'w' / 'p')
 1..64  : city  (64バイト, NUL終端・ゼロ埋め, 最大63バイト)

レスポンス (9バイト, ビッグエンディアン):
 0..3   : status (uint32)
 4      : type   (1バイト, 成功時のみエコー, それ以外は 0)
 5..8   : value  (float32 のビットパターンを uint32 として格納)
"""
from enum import Enum, IntEnum


TYPE_FIELD_SIZE = 1
CITY_FIELD_SIZE = 64
CITY_MAX_LENGTH = CITY_FIELD_SIZE - 1
REQUEST_SIZE = TYPE_FIELD_SIZE + CITY_FIELD_SIZE

RESPONSE_FORMAT = ">IcI"
RESPONSE_SIZE = 9

NUL = "\x00"

# 文字列フィールドのエンコーディング
CITY_ENCODING = "utf-8"
TYPE_ENCODING = "latin-1"


class StatusCode(IntEnum):
    """レスポンスのステータスコード"""

    SUCCESS = 0
    CITY_NOT_AVAILABLE = 1
    INVALID_REQUEST = 2


class MeasurementType(Enum):
    """気象データの種別"""

    TEMPERATURE = "t"
    HUMIDITY = "h"
    WIND = "w"
    PRESSURE = "p"

    @property
    def code(self) -> str:
        return self.value
