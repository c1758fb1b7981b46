"""Path resolution module for my-ui"""

import os
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    DEFAULT_REGISTRY_PATH,
    DEFAULT_TEMPLATES_DIR,
    ENV_REGISTRY_PATH,
    ENV_TEMPLATES_DIR,
    PROJECT_CONFIG_FILE,
)


class PathResolver:
    """Resolves the registry, template and consumer project paths"""

    def __init__(self,
                 project_root: Union[str, Path, None] = None,
                 registry_path: Union[str, Path, None] = None,
                 templates_dir: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the consumer project (defaults to cwd)
            registry_path: Registry manifest override
            templates_dir: Template tree override
        """
        self.project_root = Path(project_root or Path.cwd()).resolve()
        self._registry_path = Path(registry_path) if registry_path else None
        self._templates_dir = Path(templates_dir) if templates_dir else None

    def get_registry_path(self) -> Path:
        """Get registry manifest path

        Explicit override first, then environment, then the bundled manifest.
        """
        if self._registry_path:
            return self._registry_path.resolve()

        env_path = os.environ.get(ENV_REGISTRY_PATH)
        if env_path:
            return Path(env_path).resolve()

        return DEFAULT_REGISTRY_PATH

    def get_templates_dir(self) -> Path:
        """Get template tree directory"""
        if self._templates_dir:
            return self._templates_dir.resolve()

        env_dir = os.environ.get(ENV_TEMPLATES_DIR)
        if env_dir:
            return Path(env_dir).resolve()

        return DEFAULT_TEMPLATES_DIR

    def get_config_path(self) -> Path:
        """Get consumer config file path"""
        return self.project_root / PROJECT_CONFIG_FILE

    def describe(self) -> dict:
        """Paths in use, for debug output"""
        return {
            "project_root": str(self.project_root),
            "registry": str(self.get_registry_path()),
            "templates": str(self.get_templates_dir()),
            "config": str(self.get_config_path()),
        }
