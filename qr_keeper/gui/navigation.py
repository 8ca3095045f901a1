"""Desktop navigation actions backed by Qt."""

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QMessageBox, QWidget

logger = logging.getLogger(__name__)


class QtNavigationActions:
    """NavigationActions implementation for the desktop.

    The desktop has no notion of a "current tab", so both open methods hand
    the URL to the system handler (browser, mail client, dialer).
    """

    def __init__(self, parent: QWidget | None = None, title: str = "QR Keeper"):
        """Initialize the actions.

        Args:
            parent: Parent widget for confirmation dialogs
            title: Title of confirmation dialogs
        """
        self._parent = parent
        self._title = title

    def open_in_new_context(self, url: str) -> None:
        """Open a URL with the system's default handler."""
        self._open(url)

    def open_in_same_context(self, url: str) -> None:
        """Open a URL with the system's default handler."""
        self._open(url)

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question in a modal dialog.

        Returns:
            True if the user chose Yes
        """
        answer = QMessageBox.question(
            self._parent,
            self._title,
            prompt,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    @staticmethod
    def _open(url: str) -> None:
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning(f"No handler could open {url}")
