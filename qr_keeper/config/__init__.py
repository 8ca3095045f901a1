"""Configuration management for QR Keeper."""

from .config import QRKeeperConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["QRKeeperConfig", "ConfigManager", "create_default_config"]
