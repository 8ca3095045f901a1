"""Durable and in-memory key/value store adapters."""

import sqlite3
from pathlib import Path

from qr_keeper.exceptions import StoreReadCorruptError, StoreWriteError

DEFAULT_STORE_PATH = Path.home() / ".qr_keeper" / "store.db"


class SqliteKeyValueStore:
    """String-only key/value store backed by a SQLite file.

    Each call opens its own connection, so values written by one instance are
    visible to any other instance pointing at the same file (including one
    created after a process restart). The table is created on first use if
    ``initialize()`` was not called.
    """

    def __init__(self, db_path: Path = DEFAULT_STORE_PATH):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        self._initialized = False

    def initialize(self) -> None:
        """Create the database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS key_value (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """)
        self._initialized = True

    def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StoreReadCorruptError: If the database file cannot be read
        """
        try:
            self._ensure_initialized()
            with sqlite3.connect(str(self.db_path)) as conn:
                row = conn.execute(
                    "SELECT value FROM key_value WHERE key = ?",
                    (key,),
                ).fetchone()
        except (sqlite3.Error, OSError) as e:
            raise StoreReadCorruptError(f"Failed to read '{key}' from {self.db_path}: {e}") from e
        if row is None:
            return None
        return row[0]

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Text to store

        Raises:
            StoreWriteError: If the database could not be written, or the
                value cannot be encoded as UTF-8
        """
        try:
            self._ensure_initialized()
            with sqlite3.connect(str(self.db_path)) as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO key_value (key, value) VALUES (?, ?)",
                    (key, value),
                )
        except (sqlite3.Error, OSError, UnicodeError) as e:
            raise StoreWriteError(f"Failed to write '{key}' to {self.db_path}: {e}") from e

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()


class InMemoryKeyValueStore:
    """Volatile key/value store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
