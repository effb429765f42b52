"""
パケットモデル
"""

from .request import WeatherRequest
from .response import WeatherResponse, float_to_bits, bits_to_float

__all__ = ["WeatherRequest", "WeatherResponse", "float_to_bits", "bits_to_float"]
