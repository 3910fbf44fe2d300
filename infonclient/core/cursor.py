"""
Sequential reader over the server byte stream.

``ByteCursor`` is the only component that reads from the stream. It keeps a
running ``bytes_read`` counter that the traffic sampler polls from another
thread; the cursor is the counter's single writer.
"""
from __future__ import annotations

import struct
from typing import Protocol

from infonclient.core.binary import VARINT16_CONTINUATION

_U32_BE = struct.Struct(">I")


class Readable(Protocol):
    def read(self, size: int) -> bytes: ...


class StreamClosed(ConnectionError):
    """The stream ended (or failed) before a read could be satisfied."""

    def __init__(self, expected: int, received: int, message: str | None = None) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message or f"stream closed after {received} of {expected} bytes")


class ByteCursor:
    def __init__(self, stream: Readable, encoding: str = "utf-8") -> None:
        self.stream = stream
        self.encoding = encoding
        self.bytes_read = 0

    def read_exact(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        buf = bytearray()
        while len(buf) < size:
            try:
                chunk = self.stream.read(size - len(buf))
            except OSError as exc:
                raise StreamClosed(size, len(buf), f"stream read failed: {exc}") from exc
            if not chunk:
                raise StreamClosed(size, len(buf))
            self.bytes_read += len(chunk)
            buf.extend(chunk)
        return bytes(buf)

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def read_u32_be(self) -> int:
        return _U32_BE.unpack(self.read_exact(4))[0]

    def read_varint16(self) -> int:
        value = self.read_u8()
        if value & VARINT16_CONTINUATION:
            # bit 7 of the first byte is deliberately left in place
            value |= self.read_u8() << 7
        return value

    def read_fixed_string(self, length: int) -> str:
        return self.read_exact(length).decode(self.encoding, errors="replace")

    def read_length_prefixed_string(self) -> str:
        return self.read_fixed_string(self.read_u8())
