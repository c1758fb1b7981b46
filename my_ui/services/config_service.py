"""Configuration management service"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..constants import PROJECT_CONFIG_FILE
from ..models.config import Config


class ConfigService:
    """Service for loading and saving the consumer project configuration

    Loading never fails the calling command: a missing, unreadable or
    malformed file yields the compiled-in defaults.
    """

    def __init__(self, project_root: Union[str, Path, None] = None):
        """Initialize config service

        Args:
            project_root: Consumer project root (defaults to cwd)
        """
        self.project_root = Path(project_root or Path.cwd())
        self.config_path = self.project_root / PROJECT_CONFIG_FILE
        self._config: Optional[Config] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    @property
    def exists(self) -> bool:
        """Whether the project has a saved configuration"""
        return self.config_path.is_file()

    def load_config(self) -> Config:
        """Load configuration from file, merged over the defaults

        Returns:
            Loaded configuration
        """
        self._config = Config()

        if not self.config_path.exists():
            self.logger.debug(f"No {PROJECT_CONFIG_FILE}, using defaults")
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Ignoring unreadable {self.config_path}: {e}")
            return self._config

        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring {self.config_path}: not a JSON object")
            return self._config

        self._config = Config.from_dict(data)
        return self._config

    def save_config(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)

        Returns:
            Path of the written file
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self._config.to_dict(), f, indent=2)
            f.write("\n")

        self.logger.info(f"Configuration saved to {self.config_path}")
        return self.config_path


def load_config(project_root: Union[str, Path, None] = None) -> Config:
    """Load the project configuration, falling back to defaults"""
    return ConfigService(project_root).load_config()


def save_config(config: Config, project_root: Union[str, Path, None] = None) -> Path:
    """Write the project configuration"""
    return ConfigService(project_root).save_config(config)
