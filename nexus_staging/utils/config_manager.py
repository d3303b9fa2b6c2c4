"""
Configuration management utilities.

Settings live in a TOML file with a ``[nexus]`` section::

    [nexus]
    server_url = "https://nexus.example.com/service/local/"
    username = "deployer"
    password = "secret"
    package_group = "com.example"
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Loads the TOML configuration file and gives access to its values.

    The file is read lazily on first access and cached afterwards.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def exists(self) -> bool:
        """Whether the configuration file is present."""
        return self.config_path.is_file()

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not valid TOML
        """
        if self._config is not None:
            return self._config

        if not self.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get_section(self, section: str = CONFIG_SECTION) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (default: "nexus")

        Returns:
            Dictionary containing section data, or empty dict if section not found
        """
        value = self.load().get(section, {})
        if not isinstance(value, dict):
            raise ValueError(f"Section [{section}] in {self.config_path} must be a table")
        return value


__all__ = ["ConfigManager"]
