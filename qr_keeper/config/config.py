"""Configuration classes for QR Keeper."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class QRKeeperConfig:
    """Immutable configuration for a QR Keeper session.

    All configuration is frozen (immutable) so a running session never sees
    its storage keys or rendering settings change underneath it.
    """

    # Storage settings
    store_path: Path = field(default_factory=lambda: Path.home() / ".qr_keeper" / "store.db")
    history_key: str = "qrHistory"
    scan_count_key: str = "scanCount"

    # Display settings
    language: str = "en"  # "en" or "es"

    # Code rendering settings
    foreground_color: str = "#000000"
    background_color: str = "#ffffff"
    box_size: int = 8  # Pixels per module
    border: int = 4  # Quiet zone width in modules

    # Camera settings
    camera_index: int = 0

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.store_path, str):
            object.__setattr__(self, "store_path", Path(self.store_path))
