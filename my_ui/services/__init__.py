"""Service layer for my-ui"""

from .config_service import ConfigService, load_config, save_config

__all__ = [
    "ConfigService",
    "load_config",
    "save_config",
]
