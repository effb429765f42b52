"""
気象データサーバー

65バイトのリクエストを受信し、種別と都市を検証して合成値を生成し、
9バイトのレスポンスを返す。
"""

import argparse
import sys
from pathlib import Path

from MeteoCommonPy.packet import WeatherRequest, REQUEST_SIZE
from MeteoCommonPy.utils.config_loader import ConfigLoader
from MeteoCommonPy.utils.network import AddressResolutionError, parse_port, resolve_ipv4
from MeteoCommonPy.utils.redis_log_handler import RedisLogHandler
from MeteoServerPy.data.value_generator import ValueGenerator
from MeteoServerPy.servers.base_server import BaseServer
from .handlers import WeatherRequestHandlers

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 56700


class WeatherServer(WeatherRequestHandlers, BaseServer):
    """気象データサーバーのメインクラス"""

    def __init__(self, host=None, port=None, debug=None, seed=None, config_path=None):
        """
        初期化

        Args:
            host: バインドするアドレス（Noneの場合は設定ファイルから取得）
            port: サーバーポート（Noneの場合は設定ファイルから取得）
            debug: デバッグモードフラグ（Noneの場合は設定ファイルから取得）
            seed: 乱数シード（Noneの場合は設定ファイル、未設定なら起動時刻）
            config_path: 設定ファイルのパス（Noneの場合はモジュール同梱の config.ini）
        """
        if config_path is None:
            config_path = Path(__file__).parent / "config.ini"
        self.config = ConfigLoader(config_path)

        # 引数優先、なければ設定ファイル、なければデフォルト
        if host is None:
            host = self.config.get("server", "host", DEFAULT_HOST)
        if port is None:
            port = self.config.getint("server", "port", DEFAULT_PORT)
        if debug is None:
            debug = self.config.getboolean("server", "debug", False)
        if seed is None:
            seed = self.config.getint("generator", "seed", None)

        self.server_name = "WeatherServer"

        super().__init__(
            resolve_ipv4(host, strict=True),
            port,
            debug,
            buffer_size=self.config.getint("network", "udp_buffer_size", 512),
            poll_interval=self.config.getfloat("network", "poll_interval", 0.5),
        )

        self._init_redis_logging()

        # 乱数源は起動時に一度だけ初期化する
        self.generator = ValueGenerator(seed)
        self.logger.debug(f"[{self.server_name}] random seed: {self.generator.seed}")

    def _init_redis_logging(self):
        """設定で有効な場合、ログを Redis に配信する"""
        if not self.config.getboolean("logging", "redis_enabled", False):
            return
        if any(isinstance(h, RedisLogHandler) for h in self.logger.handlers):
            return
        self.logger.addHandler(RedisLogHandler(
            host=self.config.get("logging", "redis_host", "localhost"),
            port=self.config.getint("logging", "redis_port", 6379),
            db=self.config.getint("logging", "redis_db", 0),
            channel=self.config.get("logging", "redis_channel", "meteo.server.log"),
        ))

    def parse_request(self, data):
        """
        リクエストをパース

        65バイトでないデータグラムも警告のみで受け付け、届いた分だけ解析する。
        """
        if len(data) != REQUEST_SIZE:
            self.logger.warning(
                f"Datagram di dimensione inattesa ({len(data)}), attesi {REQUEST_SIZE} byte."
            )
        return WeatherRequest.from_bytes(data)

    def create_response(self, request, addr):
        """レスポンスを作成"""
        self.logger.info(
            f"Richiesta '{self._describe_request(request)}' dal client ip {addr[0]}"
        )
        response = self.build_weather_response(request)
        return response.to_bytes()


def main(argv=None):
    parser = argparse.ArgumentParser(description="気象データサーバーを起動します")
    parser.add_argument("-s", dest="host", default=None, help="バインドするアドレス")
    parser.add_argument("-p", dest="port", default=None, help="待ち受けポート (1-65535)")
    parser.add_argument("--debug", action="store_true", default=None, help="デバッグ出力を有効化")
    parser.add_argument("--seed", type=int, default=None, help="乱数シード")
    args = parser.parse_args(argv)

    port = None
    if args.port is not None:
        try:
            port = parse_port(args.port)
        except ValueError:
            print(f"Porta non valida: {args.port}", file=sys.stderr)
            return 1

    try:
        server = WeatherServer(host=args.host, port=port, debug=args.debug, seed=args.seed)
    except (OSError, AddressResolutionError) as e:
        print(f"Avvio del server fallito: {e}", file=sys.stderr)
        return 1

    server.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
