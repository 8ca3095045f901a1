"""Protocols for the code encoder and decoder collaborators."""

from pathlib import Path
from typing import Any, Protocol


class CodeEncoder(Protocol):
    """Interface for turning text into a renderable code image."""

    def render(self, text: str, foreground: str, background: str) -> Any:
        """Render text as a code image.

        Args:
            text: Text to encode (may be empty)
            foreground: Module color, e.g. "#000000"
            background: Background color, e.g. "#ffffff"

        Returns:
            A renderable image object.
        """
        ...

    def save_png(self, text: str, path: Path, foreground: str, background: str) -> Path:
        """Render text and write the image to a PNG file.

        Returns:
            The path written to.
        """
        ...


class FrameDecoderProtocol(Protocol):
    """Interface for decoding a single camera frame."""

    def decode(self, frame: Any) -> tuple[str | None, Exception | None]:
        """Decode a code from a frame.

        Args:
            frame: Image data for one camera frame

        Returns:
            ``(text, None)`` on success, ``(None, error)`` on failure and
            ``(None, None)`` when no code is in the frame.
        """
        ...
