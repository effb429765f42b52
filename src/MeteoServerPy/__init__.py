"""
Meteo サーバーパッケージ
"""

from .servers.weather_server import WeatherServer

__version__ = "1.0.0"

__all__ = ["WeatherServer"]
