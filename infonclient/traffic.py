"""
Periodic byte-rate sampling of a connection.

The sampler thread only ever reads the cursor's ``bytes_read`` counter; the
decode loop is its single writer, so no lock is taken.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class ByteCounter(Protocol):
    bytes_read: int


@dataclass(frozen=True)
class TrafficSample:
    bytes_per_second: int
    total_bytes: int


def compute_sample(previous_total: int, total: int, interval: float) -> TrafficSample:
    if interval <= 0:
        raise ValueError("interval must be positive")
    return TrafficSample(bytes_per_second=round((total - previous_total) / interval), total_bytes=total)


class TrafficSampler:
    def __init__(
        self,
        counter: ByteCounter,
        callback: Callable[[TrafficSample], None],
        interval: float = 1.0,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.counter = counter
        self.callback = callback
        self.interval = interval
        self._last_total = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._last_total = self.counter.bytes_read
        self._thread = threading.Thread(target=self._run, name="traffic-sampler", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def sample(self) -> TrafficSample:
        total = self.counter.bytes_read
        sample = compute_sample(self._last_total, total, self.interval)
        self._last_total = total
        return sample

    def _run(self) -> None:
        # first report goes out at start, before any interval has passed
        self._report()
        while not self._stop_event.wait(self.interval):
            self._report()

    def _report(self) -> None:
        try:
            self.callback(self.sample())
        except Exception as exc:  # pragma: no cover - sink side effects
            logger.warning("traffic callback failed: %s", exc)
