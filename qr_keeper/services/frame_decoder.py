"""Camera capture and QR decoding using OpenCV."""

import logging
from typing import Any

import cv2
import numpy as np
from PIL import Image

from qr_keeper.exceptions import CameraUnavailableError, DecodeTransientError

logger = logging.getLogger(__name__)


class FrameDecoder:
    """Decode QR codes from camera frames or still images."""

    def __init__(self):
        self.detector = cv2.QRCodeDetector()

    def decode(self, frame: Any) -> tuple[str | None, Exception | None]:
        """Decode the first QR code in a frame.

        Args:
            frame: BGR numpy array (as read from OpenCV) or a Pillow image

        Returns:
            ``(text, None)`` when a code was decoded, ``(None, None)`` when the
            frame holds no code, and ``(None, DecodeTransientError)`` when
            decoding failed.
        """
        try:
            image = self._to_bgr(frame)
            text, _, _ = self.detector.detectAndDecode(image)
        except (cv2.error, ValueError, TypeError) as e:
            logger.debug(f"Frame decode failed: {e}")
            return None, DecodeTransientError(str(e))
        if text:
            return text, None
        return None, None

    @staticmethod
    def _to_bgr(frame: Any) -> np.ndarray:
        if isinstance(frame, Image.Image):
            rgb = np.asarray(frame.convert("RGB"))
            return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
        if not isinstance(frame, np.ndarray):
            raise TypeError(f"Unsupported frame type: {type(frame).__name__}")
        return frame


class CameraSource:
    """Frame source reading from a local camera through OpenCV."""

    def __init__(self, index: int = 0):
        """Initialize the camera source.

        Args:
            index: OpenCV camera index
        """
        self.index = index
        self._cap: cv2.VideoCapture | None = None

    def open(self) -> None:
        """Open the camera.

        Raises:
            CameraUnavailableError: If no camera could be opened
        """
        cap = cv2.VideoCapture(self.index)
        if not cap or not cap.isOpened():
            raise CameraUnavailableError(f"Failed to open camera {self.index}")
        self._cap = cap

    def read_frame(self) -> np.ndarray | None:
        """Read one frame.

        Returns:
            The frame, or None if the camera returned nothing this time

        Raises:
            CameraUnavailableError: If the camera is not open
        """
        if self._cap is None:
            raise CameraUnavailableError("Camera is not open")
        ok, frame = self._cap.read()
        if not ok:
            return None
        return frame

    def close(self) -> None:
        """Release the camera if it is open."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None
