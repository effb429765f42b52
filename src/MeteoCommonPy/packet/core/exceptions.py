"""
パケット処理の例外クラス
"""


class PacketError(Exception):
    """パケット処理の基底例外"""
    pass


class ShortFrameError(PacketError):
    """受信したフレームが固定長に満たない場合の例外"""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "フレーム長が不足しています (expected: {}, got: {})".format(expected, actual)
        )


class MalformedRequestError(PacketError):
    """送信前のリクエスト文字列が不正な場合の例外"""
    pass
