"""Weather server request handler mixin."""

from MeteoCommonPy.packet import WeatherRequest, WeatherResponse, StatusCode
from MeteoServerPy.data.processors.request_validator import RequestValidator


class WeatherRequestHandlers:
    """Mixin providing handler implementations for WeatherServer."""

    def build_weather_response(self, request: WeatherRequest) -> WeatherResponse:
        """
        リクエストを検証し、レスポンスを組み立てる

        種別 -> 都市の順に検証し、どちらかが無効であれば type=NUL, value=0.0 の
        エラーレスポンスを返す。両方有効な場合のみ値を生成する。
        """
        status = RequestValidator.evaluate_request(request.type, request.city)
        if status != StatusCode.SUCCESS:
            self.logger.debug(f"[{self.server_name}] 検証失敗: {status.name}")
            return WeatherResponse.error(status)

        measurement = RequestValidator.validate_type(request.type)
        value = self.generator.generate(measurement)
        self.logger.debug(f"[{self.server_name}] 生成値: {measurement.name} = {value:.1f}")
        return WeatherResponse.success(measurement, value)

    def _describe_request(self, request: WeatherRequest) -> str:
        """ログ表示用の 'type city' 表記"""
        summary = request.get_request_summary()
        type_repr = summary["type"] if summary["type"].isprintable() else repr(summary["type"])
        return f"{type_repr} {summary['city']}"
