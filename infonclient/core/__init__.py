from infonclient.core.binary import decode_varint16, get_bit, split_nibbles
from infonclient.core.cursor import ByteCursor, Readable, StreamClosed

__all__ = [
    "ByteCursor",
    "Readable",
    "StreamClosed",
    "decode_varint16",
    "get_bit",
    "split_nibbles",
]
