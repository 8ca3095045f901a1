"""QR code rendering using the qrcode library."""

import logging
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M

logger = logging.getLogger(__name__)


class CodeRenderer:
    """Render text as a QR code image.

    Any text is accepted, including the empty string.
    """

    def __init__(self, box_size: int = 8, border: int = 4):
        """Initialize the renderer.

        Args:
            box_size: Pixels per module
            border: Quiet zone width in modules
        """
        self.box_size = box_size
        self.border = border

    def render(self, text: str, foreground: str = "#000000", background: str = "#ffffff") -> Image.Image:
        """Render text as an RGB image.

        Args:
            text: Text to encode
            foreground: Module color
            background: Background color

        Returns:
            Pillow image of the code
        """
        qr = qrcode.QRCode(
            version=None,
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        return qr.make_image(fill_color=foreground, back_color=background).convert("RGB")

    def save_png(
        self,
        text: str,
        path: Path,
        foreground: str = "#000000",
        background: str = "#ffffff",
    ) -> Path:
        """Render text and write it to a PNG file.

        Args:
            text: Text to encode
            path: Destination file
            foreground: Module color
            background: Background color

        Returns:
            The path written to

        Raises:
            OSError: If the file cannot be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(text, foreground, background).save(path, format="PNG")
        logger.info(f"Saved QR code to {path}")
        return path
