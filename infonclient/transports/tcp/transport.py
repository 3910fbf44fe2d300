from __future__ import annotations

import logging
import socket
from typing import Optional

logger = logging.getLogger(__name__)


class TcpTransport:
    def __init__(
        self,
        host: str = "localhost",
        port: int = 1234,
        auto_connect: bool = False,
    ) -> None:
        self.host = host
        self.port = port
        self._sock: Optional[socket.socket] = None
        if auto_connect:
            self.connect()

    @property
    def connected(self) -> bool:
        return self._sock is not None

    # ---- lifecycle ----
    def connect(self) -> None:
        if self._sock is not None:
            return
        try:
            sock = socket.create_connection((self.host, self.port))
        except OSError as exc:
            raise ConnectionError(
                f"Could not reach Infon server at {self.host}:{self.port}. "
                f"Check that the server is running or adjust host/port. "
                f"Original error: {exc}"
            ) from exc
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        self._sock = sock
        logger.info("connected to %s:%d", self.host, self.port)

    def close(self) -> None:
        if self._sock is None:
            return
        try:
            self._sock.close()
        finally:
            self._sock = None
            logger.info("connection to %s:%d closed", self.host, self.port)

    def __enter__(self) -> "TcpTransport":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ---- stream ----
    def read(self, size: int) -> bytes:
        """Blocking read of at most ``size`` bytes; ``b""`` once the peer closed."""
        if self._sock is None:
            raise ConnectionError("transport is not connected")
        return self._sock.recv(size)

    def write(self, data: bytes) -> None:
        if self._sock is None:
            raise ConnectionError("transport is not connected")
        self._sock.sendall(data)
