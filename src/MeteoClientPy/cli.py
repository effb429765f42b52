"""
コマンドラインクライアント

    meteo-client [-s server] [-p port] -r "type city"
"""
import argparse
import sys

from MeteoCommonPy import environment
from MeteoCommonPy.packet import PacketError
from MeteoCommonPy.utils.network import AddressResolutionError, TransportError, parse_port
from .client import Client


def build_parser():
    parser = argparse.ArgumentParser(description="気象データサーバーに照会します")
    parser.add_argument("-s", dest="server", default=None, help="サーバーのホスト名またはIPアドレス")
    parser.add_argument("-p", dest="port", default=None, help="サーバーのポート (1-65535)")
    parser.add_argument("-r", dest="request", default=None, help='リクエスト "type city"（必須）')
    parser.add_argument("--timeout", type=float, default=None, help="応答待ちの上限（秒）")
    parser.add_argument("--debug", action="store_true", help="デバッグ出力を有効化")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.request is None:
        parser.print_usage(sys.stderr)
        print("Richiesta mancante: usare -r \"type city\"", file=sys.stderr)
        return 1

    # -p 未指定時は環境変数のポートも同じ規則で検証する
    port_text = args.port if args.port is not None else environment.get("METEO_SERVER_PORT")
    port = None
    if port_text is not None:
        try:
            port = parse_port(port_text)
        except ValueError:
            print(f"Porta non valida: {port_text}", file=sys.stderr)
            return 1

    try:
        client = Client(host=args.server, port=port, debug=args.debug, timeout=args.timeout)
    except AddressResolutionError as e:
        print(f"Failed to resolve server address: {e}", file=sys.stderr)
        return 1
    except TransportError as e:
        print(f"Transport failure: {e}", file=sys.stderr)
        return 1

    with client:
        try:
            result = client.get_weather(args.request)
        except TransportError as e:
            print(f"Transport failure: {e}", file=sys.stderr)
            return 1
        except PacketError as e:
            print(f"Invalid response: {e}", file=sys.stderr)
            return 1

    print(result.display_line())
    return 0 if result.sent else 1


if __name__ == "__main__":
    sys.exit(main())
