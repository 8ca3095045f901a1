"""Default configuration values for QR Keeper."""

from .config import QRKeeperConfig


def create_default_config(**overrides) -> QRKeeperConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        QRKeeperConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            language="es",
            foreground_color="#1e3a8a"
        )
    """
    return QRKeeperConfig(**overrides)
