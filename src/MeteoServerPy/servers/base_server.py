"""
基底サーバークラス
UDPサーバーの共通機能を提供する抽象基底クラス

受信したデータグラムは1つずつ同期的に処理する（ワーカースレッドは使わない）。
"""

import socket
import time
import threading
from abc import ABC, abstractmethod

from dotenv import load_dotenv

from MeteoCommonPy.utils.log_config import LoggerConfig, UnifiedLogFormatter, PerformanceTimer
from MeteoCommonPy.utils.network import send_datagram


class BaseServer(ABC):
    """UDPサーバーの基底クラス"""

    def __init__(self, host="127.0.0.1", port=56700, debug=False,
                 buffer_size=512, poll_interval=0.5):
        """
        初期化

        Args:
            host: バインドするアドレス
            port: サーバーポート
            debug: デバッグモードフラグ
            buffer_size: 受信バッファサイズ
            poll_interval: 停止要求を確認する間隔（秒）

        Raises:
            OSError: ソケットの作成またはバインドに失敗した場合
        """
        # 環境変数を読み込む
        load_dotenv()

        self.host = host
        self.port = port
        self.debug = debug
        self.buffer_size = buffer_size
        self.poll_interval = poll_interval

        # サーバー情報（派生クラスでオーバーライド可能）
        if not hasattr(self, "server_name"):
            self.server_name = self.__class__.__name__
        self.logger = LoggerConfig.setup_server_logger(self.server_name, debug=debug)

        # ソケット初期化
        self.sock = None
        self._init_socket()

        # 統計情報
        self.request_count = 0
        self.error_count = 0
        self.start_time = None
        self._stop_event = threading.Event()

    def _init_socket(self):
        """UDPソケットの初期化"""
        try:
            self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            self.sock.bind((self.host, self.port))
        except OSError as e:
            self.logger.error(f"Failed to initialize socket on {self.host}:{self.port}: {e}")
            if self.sock is not None:
                self.sock.close()
                self.sock = None
            raise
        # ポート0指定時に割り当てられたポートを反映
        self.port = self.sock.getsockname()[1]
        self.sock.settimeout(self.poll_interval)

    @property
    def address(self):
        return self.host, self.port

    def _hex_dump(self, data):
        """バイナリデータのhexダンプを作成"""
        hex_str = ' '.join(f'{b:02x}' for b in data)
        ascii_str = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)
        return f"Hex: {hex_str}\nASCII: {ascii_str}"

    def _debug_print_request(self, data, parsed, addr):
        """リクエストのデバッグ情報を出力（派生クラスでオーバーライド可能）"""
        if not self.debug:
            return
        details = parsed.get_request_summary() if hasattr(parsed, "get_request_summary") else {}
        details["Raw"] = "\n" + self._hex_dump(data)
        self.logger.debug(UnifiedLogFormatter.format_communication_log(
            server_name=self.server_name,
            direction="recv from",
            remote_addr=addr[0],
            remote_port=addr[1],
            packet_size=len(data),
            packet_details=details,
        ))

    def _debug_print_response(self, response, addr, processing_time_ms=None):
        """レスポンスのデバッグ情報を出力（派生クラスでオーバーライド可能）"""
        if not self.debug:
            return
        self.logger.debug(UnifiedLogFormatter.format_communication_log(
            server_name=self.server_name,
            direction="sent to",
            remote_addr=addr[0],
            remote_port=addr[1],
            packet_size=len(response),
            processing_time_ms=processing_time_ms,
            packet_details={"Raw": "\n" + self._hex_dump(response)},
        ))

    @abstractmethod
    def parse_request(self, data):
        """
        リクエストデータをパース（派生クラスで実装）

        Args:
            data: 受信したバイナリデータ

        Returns:
            パースされたリクエストオブジェクト
        """
        pass

    @abstractmethod
    def create_response(self, request, addr):
        """
        レスポンスを作成（派生クラスで実装）

        Args:
            request: リクエストオブジェクト
            addr: 送信元アドレス

        Returns:
            レスポンスのバイナリデータ
        """
        pass

    def handle_request(self, data, addr):
        """
        1つのデータグラムを処理して応答を返す

        処理中の例外はログに記録してエラー数に数え、受信ループは継続する。

        Args:
            data: 受信したバイナリデータ
            addr: 送信元アドレス

        Returns:
            bool: 応答を送信できた場合 True
        """
        timer = PerformanceTimer()
        timer.start()
        self.request_count += 1

        try:
            request = self.parse_request(data)
            timer.mark("parse")
            self._debug_print_request(data, request, addr)

            response = self.create_response(request, addr)
            timer.mark("response")

            send_datagram(self.sock, response, addr)
            timer.mark("send")

            self._debug_print_response(response, addr, timer.get_elapsed_ms())
            if self.debug:
                self._print_timing_info(addr, timer.timings)
            return True

        except Exception as e:
            self.error_count += 1
            self.logger.error(f"Error processing request from {addr}: {e}")
            if self.debug:
                self.logger.exception("request handling traceback")
            return False

    def _print_timing_info(self, addr, timings):
        """タイミング情報を出力"""
        self.logger.debug(
            f"Timing for {addr}: "
            f"parse {timings.get('parse', 0):.2f}ms, "
            f"response {timings.get('response', 0):.2f}ms, "
            f"send {timings.get('send', 0):.2f}ms"
        )

    def get_statistics(self):
        """サーバー統計情報を取得"""
        uptime = time.time() - self.start_time if self.start_time else 0
        return {
            "server_name": self.server_name,
            "uptime": uptime,
            "total_requests": self.request_count,
            "errors": self.error_count,
            "success_rate": (1 - self.error_count / max(self.request_count, 1)) * 100,
        }

    def print_statistics(self):
        """統計情報を出力"""
        stats = self.get_statistics()
        self.logger.info(
            f"=== {self.server_name} STATISTICS === "
            f"Uptime: {stats['uptime']:.2f} seconds, "
            f"Total requests: {stats['total_requests']}, "
            f"Total errors: {stats['errors']}, "
            f"Success rate: {stats['success_rate']:.2f}%"
        )

    def serve_once(self):
        """
        データグラムを1つ受信して処理する

        Returns:
            bool: データグラムを処理した場合 True、タイムアウトの場合 False
        """
        try:
            data, addr = self.sock.recvfrom(self.buffer_size)
        except socket.timeout:
            # 停止要求の確認のためのタイムアウト
            return False
        except OSError as e:
            # Windowsでは前回送信先の ICMP unreachable が WSAECONNRESET として届く
            self.logger.warning(f"Socket error while receiving: {e}")
            return False
        self.handle_request(data, addr)
        return True

    def run(self):
        """サーバーを開始（停止要求まで1データグラムずつ処理する）"""
        self.logger.info(f"{self.server_name} running on {self.host}:{self.port}")
        if self.debug:
            self.logger.debug("Debug mode enabled")

        self.start_time = time.time()

        try:
            while not self._stop_event.is_set():
                self.serve_once()
        except KeyboardInterrupt:
            self.logger.info(f"{self.server_name} shutting down...")
        finally:
            self.shutdown()

    def stop(self):
        """受信ループに停止を要求（別スレッドから呼び出し可能）"""
        self._stop_event.set()

    def shutdown(self):
        """サーバーを適切にシャットダウン"""
        self._stop_event.set()
        self.print_statistics()

        if self.sock:
            self.sock.close()
            self.sock = None

        # 派生クラス固有のクリーンアップ
        self._cleanup()
        self.logger.info("Server shutdown complete.")

    def _cleanup(self):
        """派生クラス固有のクリーンアップ処理（オーバーライド可能）"""
        pass
