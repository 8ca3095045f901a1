"""Classification of scanning errors."""

from enum import Enum


class ScanErrorKind(Enum):
    """How a scanning error is surfaced to the user.

    CAMERA_UNAVAILABLE stays visible until scanning is restarted;
    DECODE_TRANSIENT is a one-shot notification.
    """

    CAMERA_UNAVAILABLE = "camera_unavailable"
    DECODE_TRANSIENT = "decode_transient"
