"""Custom exceptions for QR Keeper."""

from .base import QRKeeperException
from .scan import CameraUnavailableError, DecodeTransientError, ScanError
from .store import StoreReadCorruptError, StoreWriteError

__all__ = [
    "QRKeeperException",
    "StoreReadCorruptError",
    "StoreWriteError",
    "ScanError",
    "CameraUnavailableError",
    "DecodeTransientError",
]
