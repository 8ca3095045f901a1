"""Camera and decoding exceptions."""

from .base import QRKeeperException


class ScanError(QRKeeperException):
    """Base class for errors reported while scanning."""

    pass


class CameraUnavailableError(ScanError):
    """Raised when the camera is missing or permission to use it was denied."""

    pass


class DecodeTransientError(ScanError):
    """Raised when a single frame could not be decoded."""

    pass
