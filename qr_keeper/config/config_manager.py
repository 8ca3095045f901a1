"""Persistence of user preferences between runs."""

import json
import logging
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any

from .config import QRKeeperConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads and writes QRKeeperConfig as JSON under the user's home directory.

    A missing or unusable file yields the default configuration, so the
    application always starts.
    """

    CONFIG_FILE = Path.home() / ".qr_keeper" / "config.json"

    @classmethod
    def save_config(cls, config: QRKeeperConfig) -> None:
        """Write a configuration to the config file.

        Raises:
            OSError: If the directory or file cannot be written
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(config)
        data["store_path"] = str(config.store_path)
        cls.CONFIG_FILE.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    @classmethod
    def load_config(cls) -> QRKeeperConfig:
        """Read the saved configuration, or the defaults if there is none.

        An unreadable file or one with unknown or ill-typed settings is
        logged and ignored.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            data: Any = json.loads(cls.CONFIG_FILE.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise TypeError("config file must contain a JSON object")
            return QRKeeperConfig(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file {cls.CONFIG_FILE}, using defaults: {e}")
            return create_default_config()

    @classmethod
    def update_config(cls, config: QRKeeperConfig, **changes: Any) -> QRKeeperConfig:
        """Return a copy of config with changes applied, and save it.

        Args:
            config: Current configuration
            **changes: Fields to replace, e.g. ``language="es"``

        Returns:
            The saved configuration
        """
        updated = replace(config, **changes)
        cls.save_config(updated)
        return updated
