"""
Presence-bitmask field decoding.

Several packet types carry a mask byte followed by optional fields. Bit ``i``
(LSB first) of the mask says whether the ``i``-th optional field is on the
wire. Fields are always encoded in ascending bit order, so a packet type
describes its optional fields once as a ``FieldTable`` and hands the mask and
cursor to ``decode_masked_fields``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from infonclient.core.binary import get_bit
from infonclient.core.cursor import ByteCursor

FieldDecoder = Callable[[ByteCursor], Any]


@dataclass(frozen=True)
class MaskedField:
    bit: int
    name: str
    decode: FieldDecoder


class FieldTable:
    """
    An ordered, validated set of ``MaskedField`` entries.

    Raises:
        ValueError: If a bit is outside 0-7, a bit or name repeats, or the
            entries are not listed in strictly ascending bit order.
    """

    def __init__(self, fields: Sequence[MaskedField]) -> None:
        names: set[str] = set()
        previous = -1
        for entry in fields:
            if entry.bit < 0 or entry.bit > 7:
                raise ValueError(f"field '{entry.name}' uses bit {entry.bit}, must be between 0 and 7")
            if entry.bit <= previous:
                raise ValueError(f"field '{entry.name}' (bit {entry.bit}) breaks ascending bit order")
            if entry.name in names:
                raise ValueError(f"duplicate field name '{entry.name}'")
            names.add(entry.name)
            previous = entry.bit
        self._fields: tuple[MaskedField, ...] = tuple(fields)

    def __iter__(self) -> Iterator[MaskedField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._fields]

    def names_for_mask(self, mask: int) -> list[str]:
        return [entry.name for entry in self._fields if get_bit(mask, entry.bit)]


def decode_masked_fields(cursor: ByteCursor, mask: int, table: FieldTable) -> dict[str, Any]:
    """
    Decode the fields of ``table`` whose bits are set in ``mask``.

    Decoders of cleared bits are never called, so the cursor only consumes the
    bytes of present fields.

    Returns:
        A dict mapping the names of present fields to their decoded values.
    """
    values: dict[str, Any] = {}
    for entry in table:
        if get_bit(mask, entry.bit):
            values[entry.name] = entry.decode(cursor)
    return values
