"""Configuration management - locating, loading and validating config files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DispatchConfig


class ConfigManager:
    """Finds and loads the configuration file."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path("config/filedispatch.yaml"),
        Path.home() / ".config" / "filedispatch" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path

    def load(self, create_if_missing: bool = False) -> DispatchConfig:
        """
        Load configuration from file.

        Args:
            create_if_missing: Fall back to defaults if no config file is found.

        Returns:
            Loaded and validated configuration.

        Raises:
            FileNotFoundError: If no config found and create_if_missing is False.
            ValueError: If the config file is not valid YAML or fails validation.
        """
        config_file = self._find_config_file()

        if config_file is None:
            if create_if_missing:
                return DispatchConfig()
            raise FileNotFoundError(
                f"No configuration file found. Searched: {self._search_locations()}"
            )

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            config = DispatchConfig(**config_dict)
            self.config_path = config_file
            return config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e
        except TypeError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

    def _search_locations(self) -> list[Path]:
        if self.config_path:
            return [self.config_path]
        return self.DEFAULT_CONFIG_LOCATIONS

    def _find_config_file(self) -> Path | None:
        """Find the config file to load.

        An explicit path is the only candidate; otherwise the first existing
        default location wins.
        """
        for location in self._search_locations():
            if location.exists():
                return location
        return None


# Global config manager instance
_config_manager: ConfigManager | None = None


def get_config_manager(config_path: Path | None = None) -> ConfigManager:
    """
    Get global config manager instance.

    Args:
        config_path: Optional explicit config path. Replaces the global
            manager when it differs from the current one.

    Returns:
        ConfigManager instance.
    """
    global _config_manager
    if _config_manager is None or (
        config_path is not None and config_path != _config_manager.config_path
    ):
        _config_manager = ConfigManager(config_path)
    return _config_manager
