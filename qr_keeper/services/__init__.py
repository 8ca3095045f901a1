"""Business logic services for QR Keeper."""

from .classifier import classify, classify_scan_error
from .code_renderer import CodeRenderer
from .dispatcher import dispatch
from .event_log import EventLog
from .frame_decoder import CameraSource, FrameDecoder
from .key_value_store import InMemoryKeyValueStore, SqliteKeyValueStore
from .scan_counter import ScanCounter

__all__ = [
    "SqliteKeyValueStore",
    "InMemoryKeyValueStore",
    "EventLog",
    "ScanCounter",
    "classify",
    "classify_scan_error",
    "dispatch",
    "CodeRenderer",
    "FrameDecoder",
    "CameraSource",
]
