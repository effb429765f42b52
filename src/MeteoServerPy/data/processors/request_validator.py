"""Request field validation utilities."""

from typing import Optional

from MeteoCommonPy.packet import MeasurementType, StatusCode

# 照会可能な都市（大文字小文字は区別しない）
AVAILABLE_CITIES = (
    "Bari", "Roma", "Milano", "Napoli", "Torino",
    "Palermo", "Genova", "Bologna", "Firenze", "Venezia",
)

_CITY_KEYS = frozenset(city.casefold() for city in AVAILABLE_CITIES)
_TYPE_CODES = {m.code: m for m in MeasurementType}


class RequestValidator:
    """
    リクエスト検証クラス

    役割:
    - 測定種別コードの検証（t / h / w / p、大文字小文字を区別しない）
    - 都市名の許可リスト照合
    - 検証結果からステータスコードを決定（種別 -> 都市の順）
    """

    @staticmethod
    def validate_type(code: str) -> Optional[MeasurementType]:
        """
        測定種別コードを検証

        Args:
            code: 検証対象のコード

        Returns:
            有効な場合は MeasurementType、無効な場合は None
        """
        if not isinstance(code, str) or len(code) != 1:
            return None
        return _TYPE_CODES.get(code.lower())

    @staticmethod
    def validate_city(name: str) -> bool:
        """
        都市名が照会可能か検証

        前後の空白を除去したうえで、許可リストと完全一致（大文字小文字は区別しない）
        するかを判定する。空文字列は常に無効。
        """
        if not name:
            return False
        city = name.strip()
        return bool(city) and city.casefold() in _CITY_KEYS

    @staticmethod
    def evaluate_request(code: str, city: str) -> StatusCode:
        """種別が無効なら都市に関係なく INVALID_REQUEST"""
        if RequestValidator.validate_type(code) is None:
            return StatusCode.INVALID_REQUEST
        if not RequestValidator.validate_city(city):
            return StatusCode.CITY_NOT_AVAILABLE
        return StatusCode.SUCCESS


validate_type = RequestValidator.validate_type
validate_city = RequestValidator.validate_city
evaluate_request = RequestValidator.evaluate_request
