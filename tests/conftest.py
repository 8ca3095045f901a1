"""Pytest configuration and shared fixtures."""

import os

# Run Qt headless so GUI tests can create a QApplication without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from qr_keeper.config import QRKeeperConfig
from qr_keeper.models import HistoryEntry
from qr_keeper.orchestration import SessionController
from qr_keeper.presenters import NullPresenter
from qr_keeper.services import CodeRenderer, EventLog, InMemoryKeyValueStore, ScanCounter


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return QRKeeperConfig(
        store_path=temp_dir / "store.db",
        language="en",
        box_size=4,  # Reduced for tests
        border=4,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def memory_store():
    """Provide an empty in-memory key/value store."""
    return InMemoryKeyValueStore()


class RecordingActions:
    """A real NavigationActions implementation that records all calls for assertion."""

    def __init__(self, confirm_result: bool = True):
        self.confirm_result = confirm_result
        self.new_context = []
        self.same_context = []
        self.prompts = []

    def open_in_new_context(self, url: str) -> None:
        self.new_context.append(url)

    def open_in_same_context(self, url: str) -> None:
        self.same_context.append(url)

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.confirm_result

    @property
    def navigation_count(self) -> int:
        return len(self.new_context) + len(self.same_context)


@pytest.fixture
def recording_actions():
    """Provide navigation actions that record calls and confirm by default."""
    return RecordingActions()


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.errors = []
        self.camera_warnings = []
        self.camera_warning_clears = 0
        self.scan_results = []
        self.histories = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_camera_warning(self, message: str) -> None:
        self.camera_warnings.append(message)

    def clear_camera_warning(self) -> None:
        self.camera_warning_clears += 1

    def show_scan_result(self, text: str) -> None:
        self.scan_results.append(text)

    def show_history(self, entries: list[tuple[int, HistoryEntry]], scan_count: int) -> None:
        self.histories.append((entries, scan_count))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


@pytest.fixture
def fake_clock():
    """Provide a controllable millisecond clock."""
    return FakeClock()


@pytest.fixture
def make_controller(test_config, memory_store, recording_actions, recording_presenter, fake_clock):
    """Factory fixture for SessionController instances over shared test doubles."""

    def _make(store=None, actions=None, presenter=None, config=None, clock=None):
        store = store if store is not None else memory_store
        config = config or test_config
        return SessionController(
            config=config,
            event_log=EventLog(store, config.history_key),
            scan_counter=ScanCounter(store, config.scan_count_key),
            actions=actions or recording_actions,
            presenter=presenter or recording_presenter,
            renderer=CodeRenderer(box_size=config.box_size, border=config.border),
            clock=clock or fake_clock,
        )

    return _make
