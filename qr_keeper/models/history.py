"""Data model for generate/scan history entries."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntryKind(Enum):
    """How a history entry was produced."""

    GENERATED = "generated"
    SCANNED = "scanned"


@dataclass(frozen=True)
class HistoryEntry:
    """A single generate or scan event.

    The timestamp (milliseconds since epoch) doubles as the entry's identity
    within a session; entries recorded in the same millisecond are told apart
    by their position in the log.
    """

    kind: EntryKind
    value: str
    timestamp: int
    favorite: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON object shape."""
        return {
            "type": self.kind.value,
            "value": self.value,
            "date": self.timestamp,
            "favorite": self.favorite,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryEntry":
        """Build an entry from its persisted JSON object.

        Args:
            data: Mapping with ``type``, ``value``, ``date`` and optional ``favorite``

        Returns:
            The parsed HistoryEntry

        Raises:
            KeyError: If a required field is missing
            ValueError: If ``type`` is unknown
            TypeError: If a field has the wrong type
        """
        value = data["value"]
        timestamp = data["date"]
        favorite = data.get("favorite", False)
        if not isinstance(value, str):
            raise TypeError(f"value must be a string, got {type(value).__name__}")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise TypeError(f"date must be an integer, got {type(timestamp).__name__}")
        if not isinstance(favorite, bool):
            raise TypeError(f"favorite must be a boolean, got {type(favorite).__name__}")
        return cls(
            kind=EntryKind(data["type"]),
            value=value,
            timestamp=timestamp,
            favorite=favorite,
        )
