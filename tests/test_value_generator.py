"""
合成値ジェネレーターのテスト
"""
import pytest

from MeteoCommonPy.packet import MeasurementType
from MeteoServerPy.data.value_generator import ValueGenerator, value_range

SAMPLES = 2000


def _is_tenth(value):
    return abs(value * 10 - round(value * 10)) < 1e-6


class TestValueGenerator:

    @pytest.mark.parametrize("measurement, low, high", [
        (MeasurementType.TEMPERATURE, -10.0, 40.0),
        (MeasurementType.HUMIDITY, 20.0, 100.0),
        (MeasurementType.WIND, 0.0, 100.0),
        (MeasurementType.PRESSURE, 950.0, 1050.0),
    ])
    def test_values_within_closed_range(self, measurement, low, high):
        assert value_range(measurement) == (low, high)
        generator = ValueGenerator(seed=42)
        for _ in range(SAMPLES):
            value = generator.generate(measurement)
            assert low <= value <= high
            assert _is_tenth(value)

    def test_range_boundaries_reachable(self):
        # 気温は 501 通り
        generator = ValueGenerator(seed=7)
        low, high = -10.0, 40.0
        values = set()
        for _ in range(20000):
            values.add(generator.generate(MeasurementType.TEMPERATURE))
        assert low in values
        assert high in values
        assert len(values) == 501

    def test_same_seed_same_sequence(self):
        a = ValueGenerator(seed=99)
        b = ValueGenerator(seed=99)
        seq_a = [a.get_temperature(), a.get_humidity(), a.get_wind(), a.get_pressure()]
        seq_b = [b.get_temperature(), b.get_humidity(), b.get_wind(), b.get_pressure()]
        assert seq_a == seq_b

    def test_default_seed_is_time_based(self, monkeypatch):
        import MeteoServerPy.data.value_generator as vg
        monkeypatch.setattr(vg.time, "time", lambda: 1700000000.5)
        assert ValueGenerator().seed == 1700000000

    def test_helpers_use_matching_ranges(self):
        generator = ValueGenerator(seed=3)
        assert -10.0 <= generator.get_temperature() <= 40.0
        assert 20.0 <= generator.get_humidity() <= 100.0
        assert 0.0 <= generator.get_wind() <= 100.0
        assert 950.0 <= generator.get_pressure() <= 1050.0
