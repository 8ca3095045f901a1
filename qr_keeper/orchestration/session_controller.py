"""Orchestrator for a generate/scan session."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from qr_keeper.config import QRKeeperConfig
from qr_keeper.i18n import translate
from qr_keeper.interfaces import Clipboard, CodeEncoder, NavigationActions, PresenterProtocol
from qr_keeper.models import EntryKind, HistoryEntry, ScanErrorKind
from qr_keeper.services import EventLog, ScanCounter, classify, classify_scan_error, dispatch

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionController:
    """Record generate/scan events and act on scan results.

    The controller is the only writer of the event log and the scan counter.
    Every call runs to completion, persistence included, before returning.
    """

    def __init__(
        self,
        config: QRKeeperConfig,
        event_log: EventLog,
        scan_counter: ScanCounter,
        actions: NavigationActions,
        presenter: PresenterProtocol,
        renderer: CodeEncoder | None = None,
        clock: Callable[[], int] = _now_ms,
    ):
        """Initialize the session controller.

        Args:
            config: Configuration
            event_log: Hydrated history log
            scan_counter: Hydrated scan counter
            actions: Navigation actions for scan results
            presenter: Output presenter
            renderer: Optional code renderer used by render_code/save_code
            clock: Returns the current time in milliseconds since epoch
        """
        self.config = config
        self.event_log = event_log
        self.scan_counter = scan_counter
        self.actions = actions
        self.presenter = presenter
        self.renderer = renderer
        self._clock = clock
        entries = event_log.all()
        self._last_timestamp = entries[-1].timestamp if entries else 0
        self._scanning = False
        self._camera_warning: str | None = None
        self._last_scan_result = ""

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_generated(self, text: str) -> HistoryEntry:
        """Record that a code was generated for some text.

        The text is stored exactly as given; empty strings are allowed.

        Args:
            text: Text the code encodes

        Returns:
            The appended entry
        """
        entry = HistoryEntry(kind=EntryKind.GENERATED, value=text, timestamp=self._next_timestamp())
        self.event_log.append(entry)
        return entry

    def record_scan(self, text: str | None) -> HistoryEntry | None:
        """Record a decoded scan and act on its content.

        A missing result means no code was found in the frame and is ignored.

        Args:
            text: Decoded text, or None

        Returns:
            The appended entry, or None if nothing was recorded
        """
        if not text:
            return None

        self._last_scan_result = text
        self._scanning = False
        self.scan_counter.increment()
        entry = HistoryEntry(kind=EntryKind.SCANNED, value=text, timestamp=self._next_timestamp())
        self.event_log.append(entry)
        self.presenter.show_scan_result(text)

        dispatch(classify(text), text, self.actions)
        return entry

    def record_scan_error(self, error: BaseException) -> ScanErrorKind:
        """Surface a scanning error to the user.

        Camera-unavailable errors set a warning that persists until scanning
        is restarted. Any other error is a one-shot notification and leaves an
        existing camera warning in place.

        Args:
            error: Error reported by the camera or decoder

        Returns:
            How the error was classified
        """
        kind = classify_scan_error(error)
        logger.warning(f"Scan error ({kind.value}): {error}")
        if kind is ScanErrorKind.CAMERA_UNAVAILABLE:
            self._camera_warning = self._t("cameraWarning")
            self.presenter.show_camera_warning(self._camera_warning)
        else:
            self.presenter.show_error(self._t("errorScanning"))
        return kind

    def handle_frame(self, text: str | None, error: BaseException | None) -> None:
        """Route one decoder result to the matching handler.

        Frames delivered after scanning stopped are ignored.

        Args:
            text: Decoded text, or None
            error: Decoder error, or None
        """
        if not self._scanning:
            return
        if text:
            self.record_scan(text)
        if error is not None:
            self.record_scan_error(error)

    # ------------------------------------------------------------------
    # Scanning session
    # ------------------------------------------------------------------

    def start_scanning(self) -> None:
        """Begin accepting frames and clear any camera warning."""
        self._scanning = True
        if self._camera_warning is not None:
            self._camera_warning = None
            self.presenter.clear_camera_warning()
        self.presenter.show_info(self._t("scanningPrompt"))

    def stop_scanning(self) -> None:
        """Stop accepting frames."""
        self._scanning = False

    @property
    def scanning(self) -> bool:
        """Whether frames are currently accepted."""
        return self._scanning

    @property
    def camera_warning(self) -> str | None:
        """The persistent camera warning, if one is active."""
        return self._camera_warning

    @property
    def last_scan_result(self) -> str:
        """Text of the most recent successful scan ("" if none)."""
        return self._last_scan_result

    def copy_scan_result(self, clipboard: Clipboard) -> bool:
        """Copy the most recent scan result to the clipboard.

        Does nothing if nothing has been scanned yet.

        Args:
            clipboard: Destination clipboard

        Returns:
            True if text was copied
        """
        if not self._last_scan_result:
            return False
        clipboard.set_text(self._last_scan_result)
        self.presenter.show_info(self._t("textCopied"))
        return True

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def toggle_favorite(self, index: int) -> HistoryEntry:
        """Flip the favorite flag of an entry.

        Args:
            index: Insertion-order index, as given by history_for_display()

        Returns:
            The updated entry
        """
        return self.event_log.toggle_favorite(index)

    def history_for_display(self) -> list[tuple[int, HistoryEntry]]:
        """Return the history newest first, paired with insertion-order indices."""
        entries = self.event_log.all()
        return [(index, entries[index]) for index in range(len(entries) - 1, -1, -1)]

    def favorites(self) -> list[HistoryEntry]:
        """Return favorite entries in insertion order."""
        return [entry for entry in self.event_log.all() if entry.favorite]

    @property
    def scan_count(self) -> int:
        """Total number of successful scans."""
        return self.scan_counter.current()

    def show_history(self) -> None:
        """Send the current history to the presenter."""
        entries = self.history_for_display()
        self.presenter.show_history(entries, self.scan_count)
        if not entries:
            self.presenter.show_info(self._t("noHistory"))

    def describe_entry(self, entry: HistoryEntry) -> str:
        """Return a localised one-line label such as "SCANNED: hello"."""
        return f"{self._t(entry.kind.value)}: {entry.value}"

    def scan_count_label(self) -> str:
        """Return the localised scan total, e.g. "Total Scans: 3"."""
        return self._t("totalScans", count=self.scan_count)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_code(self, text: str) -> Any:
        """Render text with the configured colors.

        Raises:
            RuntimeError: If the controller was built without a renderer
        """
        return self._require_renderer().render(
            text, self.config.foreground_color, self.config.background_color
        )

    def save_code(self, text: str, path: Path) -> Path:
        """Render text with the configured colors and save it as PNG."""
        saved = self._require_renderer().save_png(
            text, path, self.config.foreground_color, self.config.background_color
        )
        self.presenter.show_info(self._t("codeSaved", path=saved))
        return saved

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_timestamp(self) -> int:
        # Never step backwards, even if the wall clock does
        timestamp = max(self._clock(), self._last_timestamp)
        self._last_timestamp = timestamp
        return timestamp

    def _require_renderer(self) -> CodeEncoder:
        if self.renderer is None:
            raise RuntimeError("SessionController was created without a code renderer")
        return self.renderer

    def _t(self, key: str, **kwargs) -> str:
        return translate(self.config.language, key, **kwargs)
