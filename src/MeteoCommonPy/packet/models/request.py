"""
リクエストパケット (65バイト固定長)
"""
from typing import Dict, Any, Union

from ..core.exceptions import PacketError
from ..core.format import (
    TYPE_FIELD_SIZE,
    CITY_FIELD_SIZE,
    CITY_MAX_LENGTH,
    REQUEST_SIZE,
    NUL,
    CITY_ENCODING,
    TYPE_ENCODING,
)

# 都市名の末尾から除去する文字
_CITY_TRAILING = " \r\n\t"


class WeatherRequest:
    """
    気象データリクエスト

    フレーム構成:
    - type (1バイト): 測定種別コード。デコード時は検証せずそのまま保持する。
    - city (64バイト): 都市名。63バイトで切り詰め、NUL終端後はゼロ埋め。

    このクラスはフレーミングのみを担当し、意味的な検証は行わない。
    """

    def __init__(self, type: str = NUL, city: str = "") -> None:
        """
        Args:
            type: 測定種別コード (1文字)
            city: 都市名

        Raises:
            PacketError: typeが1バイトで表現できない場合
        """
        try:
            encoded = type.encode(TYPE_ENCODING)
        except UnicodeEncodeError as e:
            raise PacketError("typeを1バイトに変換できません: {!r}".format(type)) from e
        if len(encoded) != TYPE_FIELD_SIZE:
            raise PacketError("typeは1文字である必要があります: {!r}".format(type))
        self.type = type
        self.city = city

    def to_bytes(self) -> bytes:
        """
        65バイトのリクエストフレームに変換する

        Raises:
            PacketError: typeがASCII文字でない場合
        """
        type_byte = self.type.encode(TYPE_ENCODING)
        if type_byte[0] >= 0x80:
            raise PacketError("typeはASCII文字である必要があります: {!r}".format(self.type))
        city_bytes = self.city.encode(CITY_ENCODING)[:CITY_MAX_LENGTH]
        city_field = city_bytes.ljust(CITY_FIELD_SIZE, b"\x00")
        return type_byte + city_field

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "WeatherRequest":
        """
        リクエストフレームを解析する

        65バイトに満たないフレームでも失敗させず、不足分は都市名が
        存在しないものとして扱う。

        Args:
            data: 受信したバイナリデータ

        Returns:
            WeatherRequestインスタンス
        """
        frame = bytes(data[:REQUEST_SIZE])
        type_byte = frame[:TYPE_FIELD_SIZE] or b"\x00"
        city_field = frame[TYPE_FIELD_SIZE:TYPE_FIELD_SIZE + CITY_FIELD_SIZE]
        city_bytes = city_field.split(b"\x00", 1)[0]
        city = city_bytes.decode(CITY_ENCODING, errors="replace").rstrip(_CITY_TRAILING)
        return cls(type=type_byte.decode(TYPE_ENCODING), city=city)

    def get_request_summary(self) -> Dict[str, Any]:
        """デバッグ出力用のサマリー"""
        return {
            "type": self.type if self.type != NUL else "-",
            "city": self.city if self.city else "(vuota)",
            "size": REQUEST_SIZE,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeatherRequest):
            return NotImplemented
        return self.type == other.type and self.city == other.city

    def __repr__(self) -> str:
        return "WeatherRequest(type={!r}, city={!r})".format(self.type, self.city)
