from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from infonclient.parsing.packets import Event, Frame
from infonclient.traffic import TrafficSample


class EventRecord(BaseModel):
    record: Literal["event"] = "event"
    kind: str
    packet_type: int
    length: int
    data: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_event(cls, frame: Frame, event: Event) -> "EventRecord":
        return cls(
            kind=type(event).__name__,
            packet_type=frame.type,
            length=frame.length,
            data=event.as_dict(),
        )


class TrafficRecord(BaseModel):
    record: Literal["traffic"] = "traffic"
    bytes_per_second: int
    total_bytes: int

    @classmethod
    def from_sample(cls, sample: TrafficSample) -> "TrafficRecord":
        return cls(bytes_per_second=sample.bytes_per_second, total_bytes=sample.total_bytes)
