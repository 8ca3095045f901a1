"""Factory for creating the session controller and its services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qr_keeper.config import ConfigManager, QRKeeperConfig
from qr_keeper.interfaces import KeyValueStore, NavigationActions, PresenterProtocol
from qr_keeper.orchestration import SessionController
from qr_keeper.services import (
    CameraSource,
    CodeRenderer,
    EventLog,
    FrameDecoder,
    ScanCounter,
    SqliteKeyValueStore,
)

if TYPE_CHECKING:
    from qr_keeper.gui.scan_session import ScanSession

logger = logging.getLogger(__name__)


def create_store(config: QRKeeperConfig) -> KeyValueStore:
    """Create and initialize the durable store for a configuration.

    Args:
        config: Session configuration

    Returns:
        Initialized SQLite-backed store
    """
    store = SqliteKeyValueStore(config.store_path)
    store.initialize()
    return store


def create_session_controller(
    config: QRKeeperConfig | None,
    presenter: PresenterProtocol,
    actions: NavigationActions | None = None,
    store: KeyValueStore | None = None,
) -> SessionController:
    """Create a SessionController with hydrated history and counter.

    Args:
        config: Session configuration, or None to use the saved configuration
        presenter: Output presenter for messages
        actions: Navigation actions (defaults to the Qt desktop actions)
        store: Key/value store (defaults to the SQLite store at config.store_path)

    Returns:
        Configured SessionController instance
    """
    if config is None:
        config = ConfigManager.load_config()
    if store is None:
        store = create_store(config)
    if actions is None:
        from qr_keeper.gui.navigation import QtNavigationActions

        actions = QtNavigationActions()

    event_log = EventLog(store, config.history_key)
    scan_counter = ScanCounter(store, config.scan_count_key)
    logger.info(f"Loaded {len(event_log)} history entries, {scan_counter.current()} scans")

    return SessionController(
        config=config,
        event_log=event_log,
        scan_counter=scan_counter,
        actions=actions,
        presenter=presenter,
        renderer=CodeRenderer(box_size=config.box_size, border=config.border),
    )


def create_scan_session(controller: SessionController, parent=None) -> ScanSession:
    """Create a camera ScanSession feeding the given controller.

    Args:
        controller: Session controller receiving scan results
        parent: Optional parent QObject

    Returns:
        ScanSession using the configured camera
    """
    from qr_keeper.gui.scan_session import ScanSession

    return ScanSession(
        controller=controller,
        camera=CameraSource(controller.config.camera_index),
        decoder=FrameDecoder(),
        parent=parent,
    )


def update_config(controller: SessionController, **changes) -> QRKeeperConfig:
    """Apply and save preference changes to a running controller.

    Args:
        controller: Controller whose configuration changes
        **changes: Fields to replace, e.g. ``language="es"``

    Returns:
        The new configuration
    """
    config = ConfigManager.update_config(controller.config, **changes)
    controller.config = config
    controller.renderer = CodeRenderer(box_size=config.box_size, border=config.border)
    logger.info(f"Saved preferences: {', '.join(sorted(changes))}")
    return config
