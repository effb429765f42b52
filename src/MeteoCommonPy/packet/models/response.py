"""
レスポンスパケット (9バイト固定長)
"""
import struct
from typing import Optional, Dict, Any, Union

from ..core.exceptions import PacketError, ShortFrameError
from ..core.format import (
    RESPONSE_FORMAT,
    RESPONSE_SIZE,
    NUL,
    TYPE_ENCODING,
    StatusCode,
    MeasurementType,
)

_UINT32_MAX = (1 << 32) - 1


def float_to_bits(value: float) -> int:
    """float32 のビットパターンを uint32 として取り出す"""
    try:
        return struct.unpack(">I", struct.pack(">f", value))[0]
    except OverflowError as e:
        raise PacketError("値がfloat32の範囲外です: {}".format(value)) from e


def bits_to_float(bits: int) -> float:
    """uint32 のビットパターンを float32 として解釈する"""
    return struct.unpack(">f", struct.pack(">I", bits))[0]


class WeatherResponse:
    """
    気象データレスポンス

    フレーム構成 (ビッグエンディアン):
    - status (4バイト): StatusCode
    - type (1バイト): 成功時はリクエストの種別をエコー、失敗時は 0
    - value (4バイト): float32 のビットパターン。失敗時は 0

    値は10進文字列ではなくビットパターンのまま送受信する。
    """

    def __init__(self, status: int = StatusCode.SUCCESS, type: str = NUL,
                 value: float = 0.0) -> None:
        if not 0 <= int(status) <= _UINT32_MAX:
            raise PacketError("statusがuint32の範囲外です: {}".format(status))
        self.status = int(status)
        self.type = type
        self.value = value

    @classmethod
    def success(cls, measurement: MeasurementType, value: float) -> "WeatherResponse":
        """成功レスポンスを作成"""
        return cls(status=StatusCode.SUCCESS, type=measurement.code, value=value)

    @classmethod
    def error(cls, status: StatusCode) -> "WeatherResponse":
        """エラーレスポンスを作成 (type は NUL, value は 0.0)"""
        return cls(status=status, type=NUL, value=0.0)

    @property
    def status_code(self) -> Optional[StatusCode]:
        """既知のステータスであれば StatusCode を返す"""
        try:
            return StatusCode(self.status)
        except ValueError:
            return None

    def is_success(self) -> bool:
        return self.status == StatusCode.SUCCESS

    def to_bytes(self) -> bytes:
        """9バイトのレスポンスフレームに変換する"""
        if self.is_success():
            try:
                type_byte = self.type.encode(TYPE_ENCODING)
            except UnicodeEncodeError as e:
                raise PacketError("typeを1バイトに変換できません: {!r}".format(self.type)) from e
            if len(type_byte) != 1:
                raise PacketError("typeは1文字である必要があります: {!r}".format(self.type))
            value_bits = float_to_bits(self.value)
        else:
            type_byte = b"\x00"
            value_bits = 0
        return struct.pack(RESPONSE_FORMAT, self.status, type_byte, value_bits)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "WeatherResponse":
        """
        レスポンスフレームを解析する

        Raises:
            ShortFrameError: 9バイトに満たない場合
        """
        if len(data) < RESPONSE_SIZE:
            raise ShortFrameError(RESPONSE_SIZE, len(data))
        status, type_byte, value_bits = struct.unpack(RESPONSE_FORMAT, bytes(data[:RESPONSE_SIZE]))
        return cls(
            status=status,
            type=type_byte.decode(TYPE_ENCODING),
            value=bits_to_float(value_bits),
        )

    def get_response_summary(self) -> Dict[str, Any]:
        """デバッグ出力用のサマリー"""
        code = self.status_code
        return {
            "status": code.name if code is not None else self.status,
            "type": self.type if self.type != NUL else "-",
            "value": self.value,
            "size": RESPONSE_SIZE,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeatherResponse):
            return NotImplemented
        return (
            self.status == other.status
            and self.type == other.type
            and float_to_bits(self.value) == float_to_bits(other.value)
        )

    def __repr__(self) -> str:
        return "WeatherResponse(status={}, type={!r}, value={!r})".format(
            self.status, self.type, self.value
        )
