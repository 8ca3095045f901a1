"""Presenter protocol for output abstraction."""

from typing import Protocol

from qr_keeper.models import HistoryEntry


class PresenterProtocol(Protocol):
    """Interface for presenting session output to the user.

    This protocol abstracts all output operations, allowing the same
    session logic to work with different presentation layers (GUI, tests, etc).
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display a one-shot error notification.

        Args:
            message: The error message to display
        """
        ...

    def show_camera_warning(self, message: str) -> None:
        """Display a warning that stays visible until scanning restarts.

        Args:
            message: The camera warning to display
        """
        ...

    def clear_camera_warning(self) -> None:
        """Remove a previously shown camera warning."""
        ...

    def show_scan_result(self, text: str) -> None:
        """Display the text of a successful scan.

        Args:
            text: The decoded text
        """
        ...

    def show_history(self, entries: list[tuple[int, HistoryEntry]], scan_count: int) -> None:
        """Display the history log.

        Args:
            entries: Newest-first ``(index, entry)`` pairs, where ``index`` is
                the entry's insertion-order position
            scan_count: Total number of successful scans
        """
        ...
