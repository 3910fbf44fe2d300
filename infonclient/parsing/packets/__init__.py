"""
Packet layouts of the Infon GUI stream.

``PacketDecoder`` reads one ``[length] [type]`` header at a time and turns the
payload into one of the frozen event dataclasses in ``model``.
"""
from infonclient.parsing.packets.decode import (
    CREATURE_DEAD_MARKER,
    CREATURE_FIELDS,
    PacketDecoder,
    PLAYER_FIELDS,
    SCORE_OFFSET,
)
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

__all__ = [
    "CREATURE_DEAD_MARKER",
    "CREATURE_FIELDS",
    "PacketDecoder",
    "PLAYER_FIELDS",
    "SCORE_OFFSET",
    "Chat",
    "CreatureAlive",
    "CreatureDead",
    "CreatureSpawned",
    "CreatureUpdate",
    "Event",
    "Frame",
    "King",
    "PacketType",
    "PlayerUpdate",
    "ProtocolVersion",
    "QuitMsg",
    "Transition",
    "Unknown",
    "Welcome",
]
