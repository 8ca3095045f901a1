"""Classification of decoded text and of scanning errors."""

import re

from qr_keeper.exceptions import CameraUnavailableError
from qr_keeper.models import ActionCategory, ScanErrorKind

# Ordered by precedence: the first matching pattern wins.
CLASSIFICATION_RULES: tuple[tuple[ActionCategory, re.Pattern[str]], ...] = (
    (ActionCategory.TELEPHONE, re.compile(r"^tel:[0-9]+")),
    (ActionCategory.MAIL, re.compile(r"^mailto:")),
    (ActionCategory.WEB, re.compile(r"^https?://")),
)


def classify(text: str) -> ActionCategory:
    """Classify decoded text by its link scheme.

    Args:
        text: Decoded text (may be empty)

    Returns:
        The first matching category, or PLAIN_TEXT if no rule matches
    """
    for category, pattern in CLASSIFICATION_RULES:
        if pattern.match(text):
            return category
    return ActionCategory.PLAIN_TEXT


CAMERA_UNAVAILABLE_ERROR_NAMES = frozenset({"NotAllowedError", "NotFoundError"})


def classify_scan_error(error: BaseException) -> ScanErrorKind:
    """Decide how a scanning error should be surfaced.

    Permission-denied and device-not-found errors mean the camera is
    unavailable; everything else is a transient decode failure.

    Args:
        error: Error reported by the camera or decoder

    Returns:
        CAMERA_UNAVAILABLE or DECODE_TRANSIENT
    """
    if isinstance(error, (CameraUnavailableError, PermissionError)):
        return ScanErrorKind.CAMERA_UNAVAILABLE
    name = getattr(error, "name", None)
    if not isinstance(name, str) or not name:
        name = type(error).__name__
    if name in CAMERA_UNAVAILABLE_ERROR_NAMES:
        return ScanErrorKind.CAMERA_UNAVAILABLE
    return ScanErrorKind.DECODE_TRANSIENT
