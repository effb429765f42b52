"""Meteo Client - 気象データサーバーへの照会を行うクライアント"""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from typing import Optional, Tuple

from MeteoCommonPy import environment
from MeteoCommonPy.packet import (
    WeatherRequest,
    WeatherResponse,
    StatusCode,
    MalformedRequestError,
    RESPONSE_SIZE,
)
from MeteoCommonPy.utils.log_config import LoggerConfig
from MeteoCommonPy.utils.network import (
    resolve_ipv4,
    reverse_lookup,
    send_datagram,
    receive_datagram,
    TransportError,
)
from .formatter import format_response
from .request_parser import parse_request_line

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 56700
RECEIVE_BUFFER_SIZE = 512


@dataclass
class ServerConfig:
    """気象データサーバーの接続設定"""

    host: str = field(default_factory=lambda: environment.get("METEO_SERVER_HOST", DEFAULT_HOST))
    port: int = field(default_factory=lambda: environment.get("METEO_SERVER_PORT", DEFAULT_PORT, int))
    timeout: Optional[float] = field(
        default_factory=lambda: environment.get("METEO_CLIENT_TIMEOUT", None, float)
    )


@dataclass
class WeatherResult:
    """1回の照会結果"""

    response: WeatherResponse
    city: str
    message: str
    server_name: str
    server_ip: str
    sent: bool = True

    @property
    def status(self) -> int:
        return self.response.status

    def display_line(self) -> str:
        return (
            f"Ricevuto risultato dal server {self.server_name} "
            f"(ip {self.server_ip}). {self.message}"
        )


class Client:
    """気象データサーバーと1リクエスト1レスポンスで通信するクライアント"""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        server_config: Optional[ServerConfig] = None,
        debug: bool = False,
        timeout: Optional[float] = None,
    ) -> None:
        """
        初期化

        Args:
            host: サーバーのホスト名またはIPv4アドレス
            port: サーバーのポート
            server_config: 接続設定（省略時は環境変数から）
            debug: デバッグモード
            timeout: 応答待ちの上限（秒）。None の場合は無期限に待つ

        Raises:
            ValueError: ポート番号が範囲外の場合
            AddressResolutionError: サーバーのアドレスを解決できない場合
            TransportError: ソケットをサーバーに接続できない場合
        """
        self.config = server_config or ServerConfig()
        if host is not None:
            self.config.host = host
        if port is not None:
            self.config.port = port
        if timeout is not None:
            self.config.timeout = timeout
        self.debug = debug
        self.logger = LoggerConfig.setup_client_logger(self.__class__.__name__, debug=debug)

        if not 1 <= self.config.port <= 65535:
            raise ValueError(f"無効なポート番号: {self.config.port}")

        # サーバー名は送信前に解決しておく（不正リクエストの表示にも使う）
        self.server_ip = resolve_ipv4(self.config.host, strict=True)
        self.server_name = reverse_lookup(self.server_ip)

        # connect しておき、サーバー以外からのデータグラムはカーネルで破棄させる
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.settimeout(self.config.timeout)
        try:
            self.sock.connect((self.server_ip, self.config.port))
        except OSError as e:
            self.sock.close()
            raise TransportError(f"サーバーへの接続設定に失敗しました: {e}") from e

        self.logger.debug(
            f"Meteo Client initialized - Server: {self.server_name} "
            f"({self.server_ip}:{self.config.port}), timeout: {self.config.timeout}"
        )

    def _hex_dump(self, data: bytes) -> str:
        hex_str = ' '.join(f'{b:02x}' for b in data)
        ascii_str = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)
        return f"Hex: {hex_str}\nASCII: {ascii_str}"

    def send_request(self, request: WeatherRequest) -> Tuple[WeatherResponse, Tuple[str, int]]:
        """
        リクエストを送信し、サーバーからの応答データグラムを1つ待つ

        Returns:
            tuple: (レスポンス, 応答元アドレス)

        Raises:
            TransportError: 送受信の失敗またはタイムアウト
            ShortFrameError: 応答が9バイトに満たない場合
        """
        data = request.to_bytes()
        self.logger.debug(f"Sending request {request.get_request_summary()}\n{self._hex_dump(data)}")
        send_datagram(self.sock, data)

        response_data, addr = receive_datagram(self.sock, RECEIVE_BUFFER_SIZE)
        self.logger.debug(f"Received {len(response_data)} bytes from {addr}\n{self._hex_dump(response_data)}")
        if len(response_data) > RESPONSE_SIZE:
            self.logger.warning(
                f"応答が想定より長いため先頭 {RESPONSE_SIZE} バイトのみ使用します ({len(response_data)} bytes)"
            )

        response = WeatherResponse.from_bytes(response_data)
        self.logger.debug(f"Response: {response.get_response_summary()}")
        return response, addr

    def get_weather(self, request_line: str) -> WeatherResult:
        """
        "<type> <city>" 形式の文字列で照会する

        形式が不正な場合はサーバーに送信せず、INVALID_REQUEST の結果を返す。

        Raises:
            TransportError: 送受信の失敗またはタイムアウト
            ShortFrameError: 応答が9バイトに満たない場合
        """
        try:
            request = parse_request_line(request_line)
        except MalformedRequestError as e:
            self.logger.debug(f"Malformed request {request_line!r}: {e}")
            response = WeatherResponse.error(StatusCode.INVALID_REQUEST)
            return WeatherResult(
                response=response,
                city="",
                message=format_response(response, ""),
                server_name=self.server_name,
                server_ip=self.server_ip,
                sent=False,
            )

        response, _ = self.send_request(request)
        return WeatherResult(
            response=response,
            city=request.city,
            message=format_response(response, request.city),
            server_name=self.server_name,
            server_ip=self.server_ip,
        )

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
