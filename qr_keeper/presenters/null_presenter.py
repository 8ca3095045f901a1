"""Null presenter for testing (no output)."""

from qr_keeper.models import HistoryEntry


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display a one-shot error notification (no-op)."""
        pass

    def show_camera_warning(self, message: str) -> None:
        """Display a persistent camera warning (no-op)."""
        pass

    def clear_camera_warning(self) -> None:
        """Remove the camera warning (no-op)."""
        pass

    def show_scan_result(self, text: str) -> None:
        """Display a scan result (no-op)."""
        pass

    def show_history(self, entries: list[tuple[int, HistoryEntry]], scan_count: int) -> None:
        """Display the history log (no-op)."""
        pass
