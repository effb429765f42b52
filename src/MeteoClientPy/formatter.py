"""
レスポンスの表示用メッセージ整形
"""
from MeteoCommonPy.packet import WeatherResponse, StatusCode, MeasurementType

MSG_INVALID_TYPE = "Tipo di dato non valido"
MSG_CITY_NOT_AVAILABLE = "Citta' non disponibile"
MSG_INVALID_REQUEST = "Richiesta non valida"
MSG_ERROR = "Errore"

_MEASUREMENT_TEMPLATES = {
    MeasurementType.TEMPERATURE.code: "{city}: Temperatura = {value:.1f}°C",
    MeasurementType.HUMIDITY.code: "{city}: Umidita' = {value:.1f}%",
    MeasurementType.WIND.code: "{city}: Vento = {value:.1f} km/h",
    MeasurementType.PRESSURE.code: "{city}: Pressione = {value:.1f} hPa",
}


def capitalize_city(city: str) -> str:
    """先頭の1文字のみ大文字にする（残りはそのまま）"""
    return city[:1].upper() + city[1:]


def format_response(response: WeatherResponse, city: str) -> str:
    """
    デコード済みレスポンスを表示用メッセージに変換

    Args:
        response: サーバーからのレスポンス
        city: リクエストした都市名

    Returns:
        str: 表示用メッセージ
    """
    if response.status == StatusCode.SUCCESS:
        template = _MEASUREMENT_TEMPLATES.get(response.type)
        if template is None:
            # 成功なのに未知の種別がエコーされた（プロトコル違反）
            return MSG_INVALID_TYPE
        return template.format(city=capitalize_city(city), value=response.value)
    if response.status == StatusCode.CITY_NOT_AVAILABLE:
        return MSG_CITY_NOT_AVAILABLE
    if response.status == StatusCode.INVALID_REQUEST:
        return MSG_INVALID_REQUEST
    return MSG_ERROR
