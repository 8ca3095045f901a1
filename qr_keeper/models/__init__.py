"""Data models for QR Keeper."""

from .action import ActionCategory
from .history import EntryKind, HistoryEntry
from .scan import ScanErrorKind

__all__ = [
    "EntryKind",
    "HistoryEntry",
    "ActionCategory",
    "ScanErrorKind",
]
