"""
One-line text rendering of decoded packets, in the layout of the classic
Infon debug client.
"""
from __future__ import annotations

from infonclient.parsing.packets import (
    Chat,
    CreatureDead,
    CreatureUpdate,
    Event,
    Frame,
    King,
    PlayerUpdate,
    ProtocolVersion,
    QuitMsg,
    Transition,
    Unknown,
    Welcome,
)
from infonclient.traffic import TrafficSample


def _player_line(event: PlayerUpdate) -> str:
    parts = ["player upd:", f"pno={event.pno}", f"mask={event.mask}"]
    if event.alive is not None:
        parts.append(f"alive={'joined' if event.alive else 'quit'}")
    if event.name is not None:
        parts.append(f"name={event.name}")
    if event.color is not None:
        parts.append(f"color={event.color}")
    if event.cpu is not None:
        parts.append(f"cpu={event.cpu}")
    if event.score is not None:
        parts.append(f"score={event.score}")
    return " ".join(parts)


def _creature_line(event: CreatureUpdate) -> str:
    parts = ["creature upd:", f"cno={event.cno}", f"mask={event.mask}"]
    if event.alive is not None:
        if isinstance(event.alive, CreatureDead):
            parts.append("alive=dead")
        else:
            parts.append(f"alive=spawned {event.alive.x},{event.alive.y}")
    if event.ctype is not None:
        parts.append(f"type={event.ctype}")
    if event.food is not None:
        parts.append(f"food={event.food}, health={event.health}")
    if event.state is not None:
        parts.append(f"state={event.state}")
    if event.path is not None:
        parts.append(f"path={event.path[0]},{event.path[1]}")
    if event.target is not None:
        parts.append(f"target={event.target}")
    if event.message is not None:
        parts.append(f"message={event.message}")
    if event.speed is not None:
        parts.append(f"speed={event.speed}")
    return " ".join(parts)


def format_event(event: Event) -> str:
    if isinstance(event, PlayerUpdate):
        return _player_line(event)
    if isinstance(event, Transition):
        return f"{event.a}, {event.b} => {event.c} ({event.d})"
    if isinstance(event, Chat):
        return f"msg: {event.text}"
    if isinstance(event, CreatureUpdate):
        return _creature_line(event)
    if isinstance(event, QuitMsg):
        return f"quit msg: {event.text}"
    if isinstance(event, King):
        return f"king: {event.pno}"
    if isinstance(event, Welcome):
        return f"welcome: {event.text}"
    if isinstance(event, ProtocolVersion):
        return f"server protocol version {event.version}"
    if isinstance(event, Unknown):
        return f"???: unknown packet type {event.type}"
    raise TypeError(f"unsupported event: {event!r}")


def format_frame(frame: Frame, event: Event) -> str:
    return f"len={frame.length:3d} {format_event(event)}"


def format_traffic(sample: TrafficSample) -> str:
    return f"TRAFFIC: {sample.bytes_per_second} byte/sec"
