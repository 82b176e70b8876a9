"""Configuration loader for station YAML files.

Station layouts (which dispensers exist, their limits, opening stock) and
logging settings live in YAML. This module loads them and offers dotted
access with defaults.

Typical usage example:
    from fuelstation.core.config import ConfigLoader

    config = ConfigLoader.load("config/station.yaml")
    dispensers = config.get("station.dispensers", default=[])
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Read-mostly view over a parsed YAML document.

    Examples:
        >>> config = ConfigLoader.load("config/station.yaml")
        >>> config.get("station.name", default="Unnamed")
        'Main Street'
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or its top level
                is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value using dot notation (``"station.dispensers"``).

        Args:
            key: Configuration key.
            default: Value returned when any path segment is missing.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If the section is missing or is not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one; ``other`` wins on conflicts."""
        self._data = _merge_dicts(self._data, other._data)

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()


def _merge_dicts(base: dict, override: dict) -> dict:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
