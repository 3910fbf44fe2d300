"""
Decode loop for one connection to an Infon server.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional, Protocol

from infonclient.core.cursor import ByteCursor, StreamClosed
from infonclient.parsing.packets import Event, Frame, PacketDecoder, PacketType, QuitMsg
from infonclient.traffic import TrafficSample

logger = logging.getLogger(__name__)

# Sent back once the server greets us, so it streams GUI updates.
HANDSHAKE_REPLY = b"guiclient\n"


class Stream(Protocol):
    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> None: ...


class EventSink(Protocol):
    def handle_event(self, frame: Frame, event: Event) -> None: ...

    def handle_traffic(self, sample: TrafficSample) -> None: ...


class SessionState(Enum):
    AWAITING_FRAME = auto()
    DISPATCHING = auto()
    TERMINATED = auto()
    FAILED = auto()


class Session:
    def __init__(
        self,
        stream: Stream,
        sink: EventSink,
        cursor: Optional[ByteCursor] = None,
    ) -> None:
        self.stream = stream
        self.sink = sink
        self.cursor = cursor or ByteCursor(stream)
        self.decoder = PacketDecoder(self.cursor)
        self.state = SessionState.AWAITING_FRAME
        self.handshake_sent = False

    @property
    def finished(self) -> bool:
        return self.state in (SessionState.TERMINATED, SessionState.FAILED)

    def step(self) -> Event:
        """
        Read and dispatch exactly one packet.

        Raises:
            StreamClosed: If the stream ends mid-frame or the handshake reply
                cannot be written. The session is left in ``FAILED``.
        """
        if self.finished:
            raise RuntimeError(f"session already finished ({self.state.name})")
        try:
            frame = self.decoder.read_frame()
            self.state = SessionState.DISPATCHING
            if frame.type == PacketType.WELCOME and not self.handshake_sent:
                self._send_handshake()
            event = self.decoder.decode(frame)
        except StreamClosed as exc:
            self.state = SessionState.FAILED
            logger.error("stream closed after %d bytes: %s", self.cursor.bytes_read, exc)
            raise

        try:
            self.sink.handle_event(frame, event)
        except Exception:
            self.state = SessionState.FAILED
            raise
        if isinstance(event, QuitMsg):
            self.state = SessionState.TERMINATED
            logger.info("server sent quit message, session terminated")
        else:
            self.state = SessionState.AWAITING_FRAME
        return event

    def run(self) -> SessionState:
        while not self.finished:
            self.step()
        return self.state

    def _send_handshake(self) -> None:
        try:
            self.stream.write(HANDSHAKE_REPLY)
        except OSError as exc:
            raise StreamClosed(len(HANDSHAKE_REPLY), 0, f"handshake write failed: {exc}") from exc
        self.handshake_sent = True
        logger.debug("handshake reply sent")
