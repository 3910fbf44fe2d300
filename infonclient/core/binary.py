from __future__ import annotations


VARINT16_CONTINUATION = 0x80


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def split_nibbles(byte_value: int) -> tuple[int, int]:
    return (byte_value >> 4) & 0x0F, byte_value & 0x0F


def decode_varint16(data: bytes) -> tuple[int, int]:
    """
    Decode a varint16 from the start of an in-memory buffer.

    The continuation bit of the first byte is kept in the result, so
    ``b"\\x81\\x02"`` decodes to ``0x81 | (0x02 << 7)``. Only one
    continuation byte is ever read.

    Returns:
        A ``(value, consumed)`` tuple.
    """
    if not data:
        raise ValueError("varint16 needs at least one byte")
    first = data[0]
    if not first & VARINT16_CONTINUATION:
        return first, 1
    if len(data) < 2:
        raise ValueError("varint16 continuation byte missing")
    return first | (data[1] << 7), 2
