"""
Stream transports the session reads packets from.

A transport needs ``read(size) -> bytes`` (short reads allowed, ``b""`` at
end of stream) and ``write(data)``.
"""
from infonclient.transports.tcp import TcpTransport

__all__ = ["TcpTransport"]
