"""Timer-driven camera scanning for the GUI thread."""

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from qr_keeper.exceptions import CameraUnavailableError
from qr_keeper.interfaces import FrameDecoderProtocol
from qr_keeper.orchestration import SessionController
from qr_keeper.services import CameraSource


class ScanSession(QObject):
    """Poll camera frames on the GUI thread and feed them to the controller.

    Frames are read and decoded one at a time from a QTimer, so each result is
    fully processed before the next frame is read. Stopping the session stops
    the timer; a frame already being handled still completes.
    """

    frame_ready = pyqtSignal(object)  # numpy frame, for preview widgets
    stopped = pyqtSignal()

    def __init__(
        self,
        controller: SessionController,
        camera: CameraSource,
        decoder: FrameDecoderProtocol,
        interval_ms: int = 100,
        parent=None,
    ):
        """Initialize the scan session.

        Args:
            controller: Session controller receiving decoder results
            camera: Camera frame source
            decoder: Frame decoder
            interval_ms: Delay between frame reads
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.controller = controller
        self.camera = camera
        self.decoder = decoder
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_frame)

    def start(self) -> bool:
        """Open the camera and start polling.

        Returns:
            True if scanning started, False if the camera is unavailable
        """
        self.controller.start_scanning()
        try:
            self.camera.open()
        except (CameraUnavailableError, PermissionError) as e:
            self.controller.record_scan_error(e)
            self.controller.stop_scanning()
            return False
        self._timer.start()
        return True

    def stop(self) -> None:
        """Stop polling and release the camera."""
        self._timer.stop()
        self.camera.close()
        self.controller.stop_scanning()
        self.stopped.emit()

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def _on_frame(self) -> None:
        try:
            frame = self.camera.read_frame()
        except CameraUnavailableError as e:
            self.controller.record_scan_error(e)
            self.stop()
            return
        if frame is None:
            return

        self.frame_ready.emit(frame)
        text, error = self.decoder.decode(frame)
        self.controller.handle_frame(text, error)

        # A successful scan ends the controller's session
        if not self.controller.scanning:
            self.stop()
