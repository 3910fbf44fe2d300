from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union


class PacketType(IntEnum):
    PLAYER_UPDATE = 0
    TRANSITION = 1
    CHAT = 2
    CREATURE_UPDATE = 3
    QUIT_MSG = 4
    KING = 5
    WELCOME = 32
    PROTOCOL_VERSION = 255


@dataclass(frozen=True)
class Frame:
    """
    Header of one packet on the wire.

    ``length`` sizes the payload only for chat, quit, welcome and unknown
    packets; the other types follow their own field layout.
    """
    length: int
    type: int

    @property
    def packet_type(self) -> Optional[PacketType]:
        try:
            return PacketType(self.type)
        except ValueError:
            return None


@dataclass(frozen=True)
class PlayerUpdate:
    pno: int
    mask: int
    alive: Optional[bool] = None
    name: Optional[str] = None
    color: Optional[int] = None
    cpu: Optional[int] = None
    score: Optional[int] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "pno": self.pno,
            "mask": self.mask,
            "alive": self.alive,
            "name": self.name,
            "color": self.color,
            "cpu": self.cpu,
            "score": self.score,
        }


@dataclass(frozen=True)
class Transition:
    """Opaque four byte record carried by packet type 1."""
    a: int
    b: int
    c: int
    d: int

    def as_dict(self) -> dict[str, Any]:
        return {"a": self.a, "b": self.b, "c": self.c, "d": self.d}


@dataclass(frozen=True)
class Chat:
    text: str

    def as_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class CreatureDead:
    def as_dict(self) -> dict[str, Any]:
        return {"state": "dead"}


@dataclass(frozen=True)
class CreatureSpawned:
    x: int
    y: int

    def as_dict(self) -> dict[str, Any]:
        return {"state": "spawned", "x": self.x, "y": self.y}


CreatureAlive = Union[CreatureDead, CreatureSpawned]


@dataclass(frozen=True)
class CreatureUpdate:
    cno: int
    mask: int
    alive: Optional[CreatureAlive] = None
    ctype: Optional[int] = None
    food: Optional[int] = None
    health: Optional[int] = None
    state: Optional[int] = None
    path: Optional[tuple[int, int]] = None
    target: Optional[int] = None
    message: Optional[str] = None
    speed: Optional[int] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "cno": self.cno,
            "mask": self.mask,
            "alive": self.alive.as_dict() if self.alive is not None else None,
            "ctype": self.ctype,
            "food": self.food,
            "health": self.health,
            "state": self.state,
            "path": list(self.path) if self.path is not None else None,
            "target": self.target,
            "message": self.message,
            "speed": self.speed,
        }


@dataclass(frozen=True)
class QuitMsg:
    text: str

    def as_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class King:
    pno: int

    def as_dict(self) -> dict[str, Any]:
        return {"pno": self.pno}


@dataclass(frozen=True)
class Welcome:
    text: str

    def as_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class ProtocolVersion:
    version: int

    def as_dict(self) -> dict[str, Any]:
        return {"version": self.version}


@dataclass(frozen=True)
class Unknown:
    type: int
    raw: bytes

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type, "raw": self.raw.hex()}


Event = Union[
    PlayerUpdate,
    Transition,
    Chat,
    CreatureUpdate,
    QuitMsg,
    King,
    Welcome,
    ProtocolVersion,
    Unknown,
]
