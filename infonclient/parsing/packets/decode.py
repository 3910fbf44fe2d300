"""
Packet dispatcher for the Infon GUI stream.

Every packet starts with a two byte header ``[length] [type]``. The type byte
selects the payload layout (see ``PacketType``); unknown types are skipped as
``length`` opaque bytes.
"""
from __future__ import annotations

import logging

from infonclient.core.binary import split_nibbles
from infonclient.core.cursor import ByteCursor
from infonclient.parsing.masked import FieldTable, MaskedField, decode_masked_fields
from infonclient.parsing.packets.model import (
    Chat,
    CreatureAlive,
    CreatureDead,
    CreatureSpawned,
    CreatureUpdate,
    Event,
    Frame,
    King,
    PacketType,
    PlayerUpdate,
    ProtocolVersion,
    QuitMsg,
    Transition,
    Unknown,
    Welcome,
)

logger = logging.getLogger(__name__)

# Scores travel as varint16 shifted up by this amount.
SCORE_OFFSET = 500

# Liveness byte of a creature update that marks it as dead.
CREATURE_DEAD_MARKER = 0xFF


def _read_player_alive(cursor: ByteCursor) -> bool:
    return cursor.read_u8() != 0


def _read_score(cursor: ByteCursor) -> int:
    return cursor.read_varint16() - SCORE_OFFSET


def _read_creature_alive(cursor: ByteCursor) -> CreatureAlive:
    if cursor.read_u8() == CREATURE_DEAD_MARKER:
        return CreatureDead()
    x = cursor.read_varint16()
    y = cursor.read_varint16()
    return CreatureSpawned(x=x, y=y)


def _read_food_health(cursor: ByteCursor) -> tuple[int, int]:
    return split_nibbles(cursor.read_u8())


def _read_position(cursor: ByteCursor) -> tuple[int, int]:
    x = cursor.read_varint16()
    y = cursor.read_varint16()
    return x, y


PLAYER_FIELDS = FieldTable([
    MaskedField(0, "alive", _read_player_alive),
    MaskedField(1, "name", ByteCursor.read_length_prefixed_string),
    MaskedField(2, "color", ByteCursor.read_u8),
    MaskedField(3, "cpu", ByteCursor.read_u8),
    MaskedField(4, "score", _read_score),
])

CREATURE_FIELDS = FieldTable([
    MaskedField(0, "alive", _read_creature_alive),
    MaskedField(1, "ctype", ByteCursor.read_u8),
    MaskedField(2, "food_health", _read_food_health),
    MaskedField(3, "state", ByteCursor.read_u8),
    MaskedField(4, "path", _read_position),
    MaskedField(5, "target", ByteCursor.read_varint16),
    MaskedField(6, "message", ByteCursor.read_length_prefixed_string),
    MaskedField(7, "speed", ByteCursor.read_u8),
])


class PacketDecoder:
    def __init__(self, cursor: ByteCursor) -> None:
        self.cursor = cursor

    def read_frame(self) -> Frame:
        length = self.cursor.read_u8()
        packet_type = self.cursor.read_u8()
        logger.debug("frame len=%d type=%d", length, packet_type)
        return Frame(length=length, type=packet_type)

    def next_event(self) -> tuple[Frame, Event]:
        frame = self.read_frame()
        return frame, self.decode(frame)

    def decode(self, frame: Frame) -> Event:
        """
        Decode the payload that follows ``frame``.

        Raises:
            StreamClosed: If the stream ends inside the payload.
        """
        packet_type = frame.packet_type
        if packet_type is PacketType.PLAYER_UPDATE:
            return self._decode_player_update()
        elif packet_type is PacketType.TRANSITION:
            a, b, c, d = self.cursor.read_exact(4)
            return Transition(a=a, b=b, c=c, d=d)
        elif packet_type is PacketType.CHAT:
            return Chat(text=self.cursor.read_fixed_string(frame.length))
        elif packet_type is PacketType.CREATURE_UPDATE:
            return self._decode_creature_update()
        elif packet_type is PacketType.QUIT_MSG:
            return QuitMsg(text=self.cursor.read_fixed_string(frame.length))
        elif packet_type is PacketType.KING:
            return King(pno=self.cursor.read_u8())
        elif packet_type is PacketType.WELCOME:
            text = self.cursor.read_fixed_string(frame.length)
            return Welcome(text=text.replace("\n", "").strip())
        elif packet_type is PacketType.PROTOCOL_VERSION:
            return ProtocolVersion(version=self.cursor.read_u8())
        else:
            logger.debug("skipping unknown packet type %d (%d bytes)", frame.type, frame.length)
            return Unknown(type=frame.type, raw=self.cursor.read_exact(frame.length))

    def _decode_player_update(self) -> PlayerUpdate:
        pno = self.cursor.read_u8()
        mask = self.cursor.read_u8()
        fields = decode_masked_fields(self.cursor, mask, PLAYER_FIELDS)
        return PlayerUpdate(pno=pno, mask=mask, **fields)

    def _decode_creature_update(self) -> CreatureUpdate:
        cno = self.cursor.read_varint16()
        mask = self.cursor.read_u8()
        fields = decode_masked_fields(self.cursor, mask, CREATURE_FIELDS)
        food_health = fields.pop("food_health", None)
        if food_health is not None:
            fields["food"], fields["health"] = food_health
        return CreatureUpdate(cno=cno, mask=mask, **fields)
