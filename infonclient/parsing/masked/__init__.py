"""
Presence-bitmask decoder shared by the player and creature update packets.

A packet type declares its optional fields as a ``FieldTable`` of
``MaskedField(bit, name, decode)`` entries; ``decode_masked_fields`` reads only
those whose bit is set in the mask byte.
"""
from infonclient.parsing.masked.decode import (
    decode_masked_fields,
    FieldDecoder,
    FieldTable,
    MaskedField,
)

__all__ = [
    "decode_masked_fields",
    "FieldDecoder",
    "FieldTable",
    "MaskedField",
]
