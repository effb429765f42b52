from .weather_server import WeatherServer, main

__all__ = ["WeatherServer", "main"]
