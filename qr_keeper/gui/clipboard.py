"""System clipboard backed by Qt."""

from PyQt6.QtGui import QGuiApplication


class QtClipboard:
    """Clipboard implementation using the application's QClipboard."""

    def set_text(self, text: str) -> None:
        QGuiApplication.clipboard().setText(text)
