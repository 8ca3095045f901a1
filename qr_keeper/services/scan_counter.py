"""Persisted tally of successful scans."""

import logging

from qr_keeper.exceptions import StoreReadCorruptError, StoreWriteError
from qr_keeper.interfaces import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_SCAN_COUNT_KEY = "scanCount"


class ScanCounter:
    """Monotonically increasing count of successful scans.

    The count is stored as its decimal text and written after every increment.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_SCAN_COUNT_KEY):
        """Initialize the counter and hydrate it from the store.

        Args:
            store: Persistent key/value store
            key: Key the count is stored under
        """
        self._store = store
        self._key = key
        self._count = self._hydrate()

    def increment(self) -> int:
        """Add one to the count and persist it.

        Returns:
            The new count
        """
        self._count += 1
        try:
            self._store.set(self._key, str(self._count))
        except (StoreWriteError, OSError) as e:
            logger.warning(f"Could not persist scan count {self._count}: {e}")
        return self._count

    def current(self) -> int:
        """Return the current count."""
        return self._count

    def _hydrate(self) -> int:
        try:
            raw = self._store.get(self._key)
        except StoreReadCorruptError as e:
            logger.warning(f"Discarding unreadable scan count: {e}")
            return 0
        if raw is None:
            return 0
        try:
            count = int(raw.strip())
        except ValueError:
            logger.warning(f"Discarding unparseable scan count: {raw!r}")
            return 0
        # Counts never go below zero
        return max(count, 0)
