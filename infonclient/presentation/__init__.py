from infonclient.presentation.models import EventRecord, TrafficRecord
from infonclient.presentation.sink import PrintSink
from infonclient.presentation.text import format_event, format_frame, format_traffic

__all__ = [
    "EventRecord",
    "TrafficRecord",
    "PrintSink",
    "format_event",
    "format_frame",
    "format_traffic",
]
