"""Core functionality for my-ui"""

from .path_resolver import PathResolver
from .manifest_engine import ManifestEngine, validate_registry, load_registry
from .dependency_resolver import resolve_dependencies, build_install_plan
from .file_materializer import FileMaterializer, copy_files, destination_filename
from .setup_tests import TestSetupStatus, check_test_setup, select_test_items

__all__ = [
    "PathResolver",
    "ManifestEngine",
    "validate_registry",
    "load_registry",
    "resolve_dependencies",
    "build_install_plan",
    "FileMaterializer",
    "copy_files",
    "destination_filename",
    "TestSetupStatus",
    "check_test_setup",
    "select_test_items",
]
