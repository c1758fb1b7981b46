"""my-ui - copy UI components, hooks and utilities into your project.

The registry manifest describes every distributable item; this package
validates it, resolves item dependencies and copies template files into the
consumer project according to its configuration.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .core.manifest_engine import load_registry, validate_registry
from .core.dependency_resolver import resolve_dependencies, build_install_plan
from .core.file_materializer import FileMaterializer, copy_files
from .services.config_service import ConfigService, load_config, save_config

# Data models
from .models import (
    Category,
    Bucket,
    ItemMeta,
    RegistryItem,
    Registry,
    Config,
    Advisory,
    CopyResult,
    InstallEntry,
)

# Exceptions
from .api.exceptions import MyUiError, ManifestError, UserCancelledError

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Core API functions
    "load_registry",
    "validate_registry",
    "resolve_dependencies",
    "build_install_plan",
    "copy_files",
    "load_config",
    "save_config",

    # Main classes
    "FileMaterializer",
    "ConfigService",

    # Data models
    "Category",
    "Bucket",
    "ItemMeta",
    "RegistryItem",
    "Registry",
    "Config",
    "Advisory",
    "CopyResult",
    "InstallEntry",

    # Exceptions
    "MyUiError",
    "ManifestError",
    "UserCancelledError",
]
