"""
統一ログ設定

サーバー・クライアント共通のロガー生成と、通信ログの整形を提供する。
"""
import logging
import sys
import time
from typing import Any, Dict, Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class UnifiedLogFormatter:
    """通信ログの統一フォーマッター"""

    SEPARATOR = "***"

    @staticmethod
    def format_communication_log(
        server_name: str,
        direction: str,
        remote_addr: str,
        remote_port: int,
        packet_size: int,
        auth_status: Optional[str] = None,
        processing_time_ms: Optional[float] = None,
        packet_details: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        パケット送受信のログブロックを作成

        Args:
            server_name: サーバー名
            direction: "recv from" / "sent to"
            remote_addr: 相手のアドレス
            remote_port: 相手のポート
            packet_size: パケットサイズ（バイト）
            auth_status: 認証状態（省略可）
            processing_time_ms: 処理時間（ミリ秒）
            packet_details: パケットの詳細情報

        Returns:
            str: 整形済みログ
        """
        label = "送信" if direction.startswith("sent") else "受信"
        lines = [
            UnifiedLogFormatter.SEPARATOR,
            f"{server_name}:{direction} {remote_addr}:{remote_port}",
        ]
        if auth_status:
            lines.append(auth_status)
        lines.append(f"{label} パケットバイト数: {packet_size}")
        if packet_details:
            lines.append("========")
            for key, value in packet_details.items():
                lines.append(f"{key}: {value}")
        if processing_time_ms is not None:
            lines.append(f"処理時間: {processing_time_ms:.2f}ms")
        lines.append(UnifiedLogFormatter.SEPARATOR)
        return "\n".join(lines)


class LoggerConfig:
    """ロガー生成ヘルパー"""

    _HANDLER_TYPES = ("console", "stderr")

    @staticmethod
    def setup_logger(
        name: str,
        debug: bool = False,
        handler_type: str = "console",
        fmt: str = DEFAULT_FORMAT,
    ) -> logging.Logger:
        """
        ロガーを取得し、未設定であればハンドラを追加する

        同じ名前で再度呼ばれた場合はハンドラを追加せず、レベルのみ更新する。

        Raises:
            ValueError: 未知のハンドラ種別が指定された場合
        """
        if handler_type not in LoggerConfig._HANDLER_TYPES:
            raise ValueError(f"未知のハンドラ種別: {handler_type}")

        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG if debug else logging.INFO)

        if not logger.handlers:
            if handler_type == "console":
                handler = logging.StreamHandler(sys.stdout)
            else:
                handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(fmt))
            logger.addHandler(handler)
            logger.propagate = False

        return logger

    @staticmethod
    def setup_server_logger(server_name: str, debug: bool = False) -> logging.Logger:
        return LoggerConfig.setup_logger(f"Server.{server_name}", debug=debug)

    @staticmethod
    def setup_client_logger(client_name: str, debug: bool = False) -> logging.Logger:
        # クライアントの標準出力は結果表示用のため stderr に出す
        return LoggerConfig.setup_logger(
            f"Client.{client_name}", debug=debug, handler_type="stderr"
        )


class PerformanceTimer:
    """処理時間の計測（ミリ秒）"""

    def __init__(self):
        self.start_time = None
        self.timings = {}
        self._last = None

    def start(self):
        self.start_time = time.time()
        self._last = self.start_time

    def mark(self, label: str) -> float:
        """前回のマークからの経過時間を記録して返す"""
        now = time.time()
        if self._last is None:
            self.start_time = self._last = now
        elapsed = (now - self._last) * 1000
        self.timings[label] = elapsed
        self._last = now
        return elapsed

    def get_elapsed_ms(self) -> float:
        if self.start_time is None:
            return 0.0
        return (time.time() - self.start_time) * 1000

    def reset(self):
        self.start_time = None
        self.timings = {}
        self._last = None
