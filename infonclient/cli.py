import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from infonclient.app import ClientSettings, create_logger, get_settings
from infonclient.app.config import LOG_LEVELS
from infonclient.core.cursor import ByteCursor, StreamClosed
from infonclient.presentation import PrintSink
from infonclient.session import Session, SessionState
from infonclient.traffic import TrafficSampler
from infonclient.transports.tcp import TcpTransport


class GuiClient:
    def __init__(self, settings: ClientSettings, sink: Optional[PrintSink] = None) -> None:
        self.settings = settings
        self.sink = sink or PrintSink(fmt=settings.output_format)
        self.transport = TcpTransport(host=settings.host, port=settings.port)

    def start(self) -> SessionState:
        with self.transport:
            cursor = ByteCursor(self.transport, encoding=self.settings.text_encoding)
            session = Session(self.transport, self.sink, cursor=cursor)
            sampler = None
            if self.settings.enable_traffic:
                sampler = TrafficSampler(cursor, self.sink.handle_traffic, interval=self.settings.traffic_interval)
                sampler.start()
            try:
                return session.run()
            finally:
                if sampler is not None:
                    sampler.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Watch the GUI packet stream of an Infon server.")
    parser.add_argument("host", nargs="?", default=None, help="Server host (default: localhost).")
    parser.add_argument("--port", type=int, default=None, help="Server port (default: 1234).")
    parser.add_argument("--json", action="store_true", help="Print one JSON record per line.")
    parser.add_argument("--no-traffic", action="store_true", help="Do not print byte-rate samples.")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between byte-rate samples.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[ClientSettings] = None) -> ClientSettings:
    base = base or get_settings()
    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.json:
        overrides["output_format"] = "json"
    if args.no_traffic:
        overrides["enable_traffic"] = False
    if args.interval is not None:
        overrides["traffic_interval"] = args.interval
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return ClientSettings(**{**base.model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        print(f"Error: invalid settings\n{exc}", file=sys.stderr)
        return 2
    logger = create_logger("infonclient", settings.log_level)

    client = GuiClient(settings)
    try:
        client.start()
    except StreamClosed as exc:
        logger.error("connection lost: %s", exc)
        return 1
    except ConnectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
