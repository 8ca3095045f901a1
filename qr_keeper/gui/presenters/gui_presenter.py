"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from qr_keeper.models import HistoryEntry


class GUIPresenter(QObject):
    """Presenter that forwards session output as Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    Widgets connect to the signals; the camera warning has its own pair of
    signals because it stays on screen until scanning restarts, unlike the
    one-shot error notification.
    """

    info_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    camera_warning_signal = pyqtSignal(str)
    camera_warning_cleared_signal = pyqtSignal()
    scan_result_signal = pyqtSignal(str)
    history_signal = pyqtSignal(list, int)  # list[tuple[int, HistoryEntry]], scan count

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.info_signal.emit(message)

    def show_error(self, message: str) -> None:
        """Display a one-shot error notification."""
        self.error_signal.emit(message)

    def show_camera_warning(self, message: str) -> None:
        """Display a warning that stays visible until scanning restarts."""
        self.camera_warning_signal.emit(message)

    def clear_camera_warning(self) -> None:
        """Remove a previously shown camera warning."""
        self.camera_warning_cleared_signal.emit()

    def show_scan_result(self, text: str) -> None:
        """Display the text of a successful scan."""
        self.scan_result_signal.emit(text)

    def show_history(self, entries: list[tuple[int, HistoryEntry]], scan_count: int) -> None:
        """Display the history log.

        Args:
            entries: Newest-first ``(index, entry)`` pairs
            scan_count: Total number of successful scans
        """
        self.history_signal.emit(entries, scan_count)
