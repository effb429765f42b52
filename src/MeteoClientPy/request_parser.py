"""
リクエスト文字列 "<type> <city>" の解析

ネットワーク送信前にクライアント側で形式を検証する。
"""
import string

from MeteoCommonPy.packet import WeatherRequest, MalformedRequestError, CITY_MAX_LENGTH
from MeteoCommonPy.packet.core.format import CITY_ENCODING

_WHITESPACE = string.whitespace


def split_request_line(line: str):
    """
    先頭の空白区切りトークンと残り（都市部分）に分割する

    Returns:
        tuple: (token, rest) 残りは先頭の空白のみ除去される
    """
    stripped = line.lstrip(_WHITESPACE)
    end = 0
    while end < len(stripped) and stripped[end] not in _WHITESPACE:
        end += 1
    token = stripped[:end]
    rest = stripped[end:].lstrip(_WHITESPACE)
    return token, rest


def parse_request_line(line: str) -> WeatherRequest:
    """
    リクエスト文字列を WeatherRequest に変換する

    種別の値そのものはサーバー側で検証するため、ここでは形式のみを確認する。

    Raises:
        MalformedRequestError:
            - 先頭トークンが1バイトの1文字でない
            - 都市名にタブ文字が含まれる
            - 都市名が空、または63バイトを超える
    """
    token, city = split_request_line(line)

    if len(token.encode(CITY_ENCODING)) != 1:
        raise MalformedRequestError(f"種別トークンは1文字である必要があります: {token!r}")
    if "\t" in city:
        raise MalformedRequestError("都市名にタブ文字は使用できません")

    city_length = len(city.encode(CITY_ENCODING))
    if city_length == 0:
        raise MalformedRequestError("都市名が指定されていません")
    if city_length > CITY_MAX_LENGTH:
        raise MalformedRequestError(
            f"都市名が長すぎます ({city_length} > {CITY_MAX_LENGTH} バイト)"
        )

    return WeatherRequest(type=token, city=city)
