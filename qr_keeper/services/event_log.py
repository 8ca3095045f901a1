"""Ordered, persisted log of generate/scan events."""

import json
import logging
from dataclasses import replace

from qr_keeper.exceptions import StoreReadCorruptError, StoreWriteError
from qr_keeper.interfaces import KeyValueStore
from qr_keeper.models import HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "qrHistory"


class EventLog:
    """Append-only sequence of history entries with favorite toggling.

    The sequence is kept in insertion order. Every mutation re-serializes the
    whole sequence to the store; a failed write is logged and the in-memory
    log stays authoritative for the rest of the session.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_HISTORY_KEY):
        """Initialize the log and hydrate it from the store.

        Args:
            store: Persistent key/value store
            key: Key the serialized log is stored under
        """
        self._store = store
        self._key = key
        self._entries: list[HistoryEntry] = self._hydrate()

    def append(self, entry: HistoryEntry) -> None:
        """Add an entry to the end of the log and persist the log.

        Args:
            entry: Entry to append
        """
        self._entries.append(entry)
        self._persist()

    def toggle_favorite(self, index: int) -> HistoryEntry:
        """Flip the favorite flag of one entry and persist the log.

        Args:
            index: Zero-based position in insertion order (not display order)

        Returns:
            The updated entry

        Raises:
            IndexError: If index does not address an existing entry
        """
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"History index {index} out of range for log of {len(self._entries)} entries"
            )
        entry = self._entries[index]
        updated = replace(entry, favorite=not entry.favorite)
        self._entries[index] = updated
        self._persist()
        return updated

    def all(self) -> tuple[HistoryEntry, ...]:
        """Return the full log in insertion order as an immutable snapshot."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _hydrate(self) -> list[HistoryEntry]:
        """Load the stored log, falling back to an empty log on any failure."""
        try:
            raw = self._store.get(self._key)
            if raw is None:
                return []
            return self._parse(raw)
        except StoreReadCorruptError as e:
            logger.warning(f"Discarding unreadable history: {e}")
            return []

    @staticmethod
    def _parse(raw: str) -> list[HistoryEntry]:
        """Parse a serialized log.

        Args:
            raw: JSON array of entry objects

        Returns:
            Entries in stored order

        Raises:
            StoreReadCorruptError: If the text is not a valid serialized log
        """
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            return [HistoryEntry.from_dict(item) for item in data]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise StoreReadCorruptError(f"Malformed history log: {e}") from e

    def _persist(self) -> None:
        """Write the whole log to the store (best effort)."""
        payload = json.dumps([entry.to_dict() for entry in self._entries])
        try:
            self._store.set(self._key, payload)
        except (StoreWriteError, OSError) as e:
            logger.warning(f"Could not persist history ({len(self._entries)} entries): {e}")
