"""Base exception classes for QR Keeper."""


class QRKeeperException(Exception):
    """Base exception for all QR Keeper errors.

    All custom exceptions in the qr_keeper package should inherit
    from this base class for consistent error handling.
    """

    pass
