"""
合成気象データの生成

測定種別ごとの閉区間から 0.1 刻みで一様に値を選ぶ。
"""
import random
import time
from typing import Dict, Optional, Tuple

from MeteoCommonPy.packet import MeasurementType

# 0.1 単位の整数で表した閉区間
VALUE_RANGES_TENTHS: Dict[MeasurementType, Tuple[int, int]] = {
    MeasurementType.TEMPERATURE: (-100, 400),    # -10.0 .. 40.0 °C
    MeasurementType.HUMIDITY: (200, 1000),       # 20.0 .. 100.0 %
    MeasurementType.WIND: (0, 1000),             # 0.0 .. 100.0 km/h
    MeasurementType.PRESSURE: (9500, 10500),     # 950.0 .. 1050.0 hPa
}


def value_range(measurement: MeasurementType) -> Tuple[float, float]:
    """測定種別の値域 (最小, 最大)"""
    low, high = VALUE_RANGES_TENTHS[measurement]
    return low / 10.0, high / 10.0


class ValueGenerator:
    """プロセス全体で1つの乱数源を共有する値ジェネレーター"""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 乱数シード（Noneの場合は起動時刻）
        """
        self.seed = int(time.time()) if seed is None else seed
        self._random = random.Random(self.seed)

    def generate(self, measurement: MeasurementType) -> float:
        low, high = VALUE_RANGES_TENTHS[measurement]
        return self._random.randint(low, high) / 10.0

    def get_temperature(self) -> float:
        return self.generate(MeasurementType.TEMPERATURE)

    def get_humidity(self) -> float:
        return self.generate(MeasurementType.HUMIDITY)

    def get_wind(self) -> float:
        return self.generate(MeasurementType.WIND)

    def get_pressure(self) -> float:
        return self.generate(MeasurementType.PRESSURE)
