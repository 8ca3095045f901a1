"""Protocol for durable key/value storage."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a string-only key/value store that survives restarts.

    Values are always text: structured data is serialized by the caller
    before it reaches the store.
    """

    def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if nothing is stored under the key.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Text to store

        Raises:
            StoreWriteError: If the value could not be written.
        """
        ...
