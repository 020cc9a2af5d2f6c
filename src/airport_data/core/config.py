"""Configuration loading for the airport query engine.

Settings live in a YAML file with nested sections. ConfigLoader gives
dot-notation access to the raw data and EngineSettings turns it into the
typed values the engines need.

Typical usage example:
    from airport_data.core.config import ConfigLoader, EngineSettings

    config = ConfigLoader.load("config/settings.yaml")
    limit = config.get("search.autocomplete_limit", default=10)

    settings = EngineSettings.from_config(config)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from airport_data.core.resource_path import get_config_path, get_project_root

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "settings.yaml"


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> radius = config.get("geo.earth_radius_km", default=6371.0)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping.
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
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g. "search.min_query_length").
            default: Default value if key not found.

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


@dataclass(frozen=True)
class EngineSettings:
    """Typed engine settings.

    Attributes:
        dataset_path: Dataset blob to load; None selects the packaged one
        min_query_length: Shortest accepted name search query
        autocomplete_limit: Maximum number of autocomplete suggestions
        earth_radius_km: Sphere radius for great-circle distances
        default_limit: Default size of ranking results
        logging_config: Logging YAML to initialize from, if any
    """

    dataset_path: Path | None = None
    min_query_length: int = 2
    autocomplete_limit: int = 10
    earth_radius_km: float = 6371.0
    default_limit: int = 10
    logging_config: Path | None = None

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "EngineSettings":
        """Build settings from a loaded configuration.

        Relative paths resolve against the project root.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        defaults = cls()
        try:
            return cls(
                dataset_path=_optional_path(config.get("dataset.path")),
                min_query_length=int(config.get("search.min_query_length", defaults.min_query_length)),
                autocomplete_limit=int(config.get("search.autocomplete_limit", defaults.autocomplete_limit)),
                earth_radius_km=float(config.get("geo.earth_radius_km", defaults.earth_radius_km)),
                default_limit=int(config.get("stats.default_limit", defaults.default_limit)),
                logging_config=_optional_path(config.get("logging.config")),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid engine setting: {e}") from e

    @classmethod
    def load(cls, path: str | Path | None = None) -> "EngineSettings":
        """Load settings from a YAML file.

        Args:
            path: Settings file. If None, config/settings.yaml is used when
                it exists and built-in defaults otherwise.

        Raises:
            ConfigError: If an explicitly given file cannot be loaded.
        """
        if path is None:
            default_path = get_config_path(DEFAULT_SETTINGS_FILE)
            if not default_path.exists():
                logger.debug("No settings file at %s, using defaults", default_path)
                return cls()
            path = default_path

        return cls.from_config(ConfigLoader.load(path))


def _optional_path(value: Any) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = get_project_root() / path
    return path
