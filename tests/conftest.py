import sys
import threading
from pathlib import Path

import pytest

# src ディレクトリをインポートパスに追加
ROOT_DIR = Path(__file__).resolve().parents[1]
src_path = ROOT_DIR / 'src'
if src_path.exists():
    sys.path.insert(0, str(src_path))

from MeteoServerPy.servers.weather_server import WeatherServer  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_meteo_env(monkeypatch):
    for key in ("METEO_SERVER_HOST", "METEO_SERVER_PORT", "METEO_CLIENT_TIMEOUT", "METEO_CONFIG"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def weather_server():
    """エフェメラルポートで受信ループを別スレッド実行するサーバー"""
    server = WeatherServer(host="127.0.0.1", port=0, debug=False, seed=1234)
    thread = threading.Thread(target=server.run, name="WeatherServerTest", daemon=True)
    thread.start()
    yield server
    server.stop()
    thread.join(timeout=5)
