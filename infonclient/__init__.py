from infonclient.app import ClientSettings, get_settings
from infonclient.core import ByteCursor, StreamClosed
from infonclient.parsing.packets import Event, Frame, PacketDecoder, PacketType
from infonclient.session import HANDSHAKE_REPLY, Session, SessionState
from infonclient.traffic import TrafficSample, TrafficSampler
from infonclient.transports import TcpTransport
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ByteCursor",
    "ClientSettings",
    "Event",
    "Frame",
    "get_settings",
    "HANDSHAKE_REPLY",
    "PacketDecoder",
    "PacketType",
    "Session",
    "SessionState",
    "StreamClosed",
    "TcpTransport",
    "TrafficSample",
    "TrafficSampler",
]

try:
    __version__ = version("infonclient")
except PackageNotFoundError:
    __version__ = "0.0.0"
