"""Persistent store exceptions."""

from .base import QRKeeperException


class StoreReadCorruptError(QRKeeperException):
    """Raised when a persisted value cannot be parsed."""

    pass


class StoreWriteError(QRKeeperException):
    """Raised when a value cannot be written to the persistent store."""

    pass
