"""
ネットワーク関連ユーティリティ
"""
import socket
from typing import Optional, Tuple


class TransportError(Exception):
    """データグラムの送受信に失敗した場合の例外"""
    pass


class AddressResolutionError(Exception):
    """ホスト名をIPv4アドレスに解決できなかった場合の例外"""
    pass


def parse_port(value) -> int:
    """
    ポート番号文字列を検証して整数に変換する

    Raises:
        ValueError: 整数でない、または 1-65535 の範囲外の場合
    """
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"ポート番号が整数ではありません: {value}")
    port = int(text)
    if not 1 <= port <= 65535:
        raise ValueError(f"ポート番号が範囲外です: {value}")
    return port


def resolve_ipv4(host: str, strict: bool = False) -> str:
    """
    ホスト名をIPv4アドレスに解決する

    Args:
        host: ホスト名またはIPv4アドレス
        strict: Trueの場合、解決失敗時に AddressResolutionError を送出

    Returns:
        str: IPv4アドレス（strict=Falseで失敗した場合は host をそのまま返す）
    """
    try:
        socket.inet_pton(socket.AF_INET, host)
        return host
    except (OSError, TypeError):
        pass
    try:
        return socket.gethostbyname(host)
    except (OSError, UnicodeError) as e:
        if strict:
            raise AddressResolutionError(f"アドレス解決に失敗しました: {host}") from e
        return host


def reverse_lookup(ip: str) -> str:
    """IPアドレスからホスト名を逆引きする（失敗時はIPアドレスを返す）"""
    try:
        name, _, _ = socket.gethostbyaddr(ip)
        return name
    except (OSError, UnicodeError):
        return ip


def send_datagram(sock: socket.socket, data: bytes, addr: Optional[Tuple[str, int]] = None) -> int:
    """
    1つのデータグラムとして data 全体を送信する

    addr を省略した場合は connect 済みの送信先に送る。

    Raises:
        TransportError: 送信エラー、または一部しか送信できなかった場合
    """
    try:
        sent = sock.send(data) if addr is None else sock.sendto(data, addr)
    except OSError as e:
        raise TransportError(f"送信に失敗しました: {e}") from e
    if sent != len(data):
        raise TransportError(f"送信バイト数が不足しています ({sent}/{len(data)})")
    return sent


def receive_datagram(sock: socket.socket, buffer_size: int) -> Tuple[bytes, Tuple[str, int]]:
    """
    1つのデータグラムを受信する

    Raises:
        TransportError: タイムアウト、受信エラー、または空データの場合
    """
    try:
        data, addr = sock.recvfrom(buffer_size)
    except socket.timeout as e:
        raise TransportError("応答待ちがタイムアウトしました") from e
    except OSError as e:
        raise TransportError(f"受信に失敗しました: {e}") from e
    if not data:
        raise TransportError("空のデータグラムを受信しました")
    return data, addr
