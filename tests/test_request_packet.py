"""
WeatherRequest のフレーミングテスト
"""
import pytest

from MeteoCommonPy.packet import WeatherRequest, PacketError, REQUEST_SIZE


class TestRequestEncode:
    """to_bytes のテスト"""

    def test_fixed_size_and_layout(self):
        data = WeatherRequest("t", "bari").to_bytes()
        assert len(data) == REQUEST_SIZE == 65
        assert data[0:1] == b"t"
        assert data[1:5] == b"bari"
        assert data[5:] == b"\x00" * 60

    def test_city_truncated_to_63_bytes_with_terminator(self):
        data = WeatherRequest("h", "x" * 100).to_bytes()
        assert len(data) == 65
        assert data[1:64] == b"x" * 63
        assert data[64] == 0

    def test_empty_city(self):
        data = WeatherRequest("w", "").to_bytes()
        assert data == b"w" + b"\x00" * 64

    def test_type_must_be_single_byte(self):
        with pytest.raises(PacketError):
            WeatherRequest("tt", "roma")
        with pytest.raises(PacketError):
            WeatherRequest("", "roma")
        with pytest.raises(PacketError):
            WeatherRequest("€", "roma")

    def test_non_ascii_type_rejected_on_encode(self):
        with pytest.raises(PacketError):
            WeatherRequest("é", "roma").to_bytes()

    def test_non_ascii_type_kept_on_decode(self):
        request = WeatherRequest.from_bytes(b"\xe9" + b"roma".ljust(64, b"\x00"))
        assert request.type == "\xe9"


class TestRequestDecode:
    """from_bytes のテスト"""

    def test_decode_full_frame(self):
        frame = b"p" + b"Milano".ljust(64, b"\x00")
        request = WeatherRequest.from_bytes(frame)
        assert request.type == "p"
        assert request.city == "Milano"

    def test_decode_does_not_validate_type(self):
        request = WeatherRequest.from_bytes(b"z" + b"roma".ljust(64, b"\x00"))
        assert request.type == "z"

    def test_trailing_whitespace_stripped(self):
        frame = b"t" + b"Roma \r\n\t".ljust(64, b"\x00")
        assert WeatherRequest.from_bytes(frame).city == "Roma"

    def test_leading_whitespace_kept(self):
        frame = b"t" + b"  Roma".ljust(64, b"\x00")
        assert WeatherRequest.from_bytes(frame).city == "  Roma"

    def test_city_without_terminator_is_length_bound(self):
        frame = b"t" + b"a" * 64
        assert WeatherRequest.from_bytes(frame).city == "a" * 64

    def test_content_after_terminator_ignored(self):
        frame = b"t" + b"Bari\x00garbage".ljust(64, b"\x00")
        assert WeatherRequest.from_bytes(frame).city == "Bari"

    @pytest.mark.parametrize("frame, expected_type, expected_city", [
        (b"", "\x00", ""),
        (b"t", "t", ""),
        (b"tBa", "t", "Ba"),
        (b"hNapoli", "h", "Napoli"),
    ])
    def test_short_frames_are_truncated_not_rejected(self, frame, expected_type, expected_city):
        request = WeatherRequest.from_bytes(frame)
        assert request.type == expected_type
        assert request.city == expected_city

    def test_oversized_frame_uses_first_65_bytes(self):
        frame = b"w" + b"Torino".ljust(64, b"\x00") + b"extra"
        request = WeatherRequest.from_bytes(frame)
        assert request == WeatherRequest("w", "Torino")

    def test_encode_then_decode(self):
        original = WeatherRequest("T", "Venezia")
        assert WeatherRequest.from_bytes(original.to_bytes()) == original

    def test_summary_for_empty_request(self):
        summary = WeatherRequest.from_bytes(b"").get_request_summary()
        assert summary["type"] == "-"
        assert summary["city"] == "(vuota)"
