import logging
import time
import pytest
from MeteoCommonPy.utils.log_config import UnifiedLogFormatter, LoggerConfig, PerformanceTimer


def test_format_communication_log_full():
    msg = UnifiedLogFormatter.format_communication_log(
        server_name="WeatherServer",
        direction="sent to",
        remote_addr="127.0.0.1",
        remote_port=40000,
        packet_size=9,
        auth_status="no auth",
        processing_time_ms=1.5,
        packet_details={"status": "SUCCESS", "type": "t"}
    )
    expected_lines = [
        "***",
        "WeatherServer:sent to 127.0.0.1:40000",
        "no auth",
        "送信 パケットバイト数: 9",
        "========",
        "status: SUCCESS",
        "type: t",
        "処理時間: 1.50ms",
        "***",
    ]
    for line in expected_lines:
        assert line in msg


def test_format_communication_log_minimal():
    msg = UnifiedLogFormatter.format_communication_log(
        server_name="WeatherServer",
        direction="recv from",
        remote_addr="10.0.0.1",
        remote_port=1,
        packet_size=65,
    )
    assert "受信 パケットバイト数: 65" in msg
    assert "========" not in msg
    assert "処理時間" not in msg


def test_setup_logger_and_reuse_and_invalid_handler():
    logger = LoggerConfig.setup_logger("meteo.test", debug=True)
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0], logging.StreamHandler)

    handler_count = len(logger.handlers)
    same = LoggerConfig.setup_logger("meteo.test", debug=False)
    assert same is logger
    assert len(logger.handlers) == handler_count
    assert logger.level == logging.INFO

    with pytest.raises(ValueError):
        LoggerConfig.setup_logger("x", handler_type="unknown")
    with pytest.raises(ValueError):
        LoggerConfig.setup_logger("y", handler_type="null")


def test_specific_helper_loggers():
    srv = LoggerConfig.setup_server_logger("mysrv", debug=False)
    assert srv.name == "Server.mysrv"

    cli = LoggerConfig.setup_client_logger("mycli", debug=True)
    assert cli.name == "Client.mycli"


def test_performance_timer_flow(monkeypatch):
    timer = PerformanceTimer()
    times = [100.0, 101.0, 102.5]
    monkeypatch.setattr(time, "time", lambda: times.pop(0))

    timer.start()
    first = timer.mark("step")
    assert "step" in timer.timings
    assert first == 1000.0

    elapsed = timer.get_elapsed_ms()
    assert elapsed == 2500.0

    timer.reset()
    assert timer.start_time is None
    assert timer.timings == {}
