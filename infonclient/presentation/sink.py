from __future__ import annotations

import sys
import threading
from typing import Literal, Optional, TextIO

from infonclient.parsing.packets import Event, Frame
from infonclient.presentation.models import EventRecord, TrafficRecord
from infonclient.presentation.text import format_frame, format_traffic
from infonclient.traffic import TrafficSample


class PrintSink:
    """Writes one line per event or traffic sample to ``stream``."""

    def __init__(self, stream: Optional[TextIO] = None, fmt: Literal["text", "json"] = "text") -> None:
        if fmt not in ("text", "json"):
            raise ValueError(f"unsupported output format: {fmt}")
        self.stream = stream or sys.stdout
        self.fmt = fmt
        # the sampler thread prints too
        self._lock = threading.Lock()

    def handle_event(self, frame: Frame, event: Event) -> None:
        if self.fmt == "json":
            line = EventRecord.from_event(frame, event).model_dump_json()
        else:
            line = format_frame(frame, event)
        self._write(line)

    def handle_traffic(self, sample: TrafficSample) -> None:
        if self.fmt == "json":
            line = TrafficRecord.from_sample(sample).model_dump_json()
        else:
            line = format_traffic(sample)
        self._write(line)

    def _write(self, line: str) -> None:
        with self._lock:
            self.stream.write(line + "\n")
            self.stream.flush()
