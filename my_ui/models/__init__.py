# my_ui/models/__init__.py
"""Data models for my-ui"""

from .registry import Category, Bucket, ItemMeta, RegistryItem, Registry
from .config import Config
from .result import Advisory, FileStatus, FileOutcome, CopyResult, InstallEntry

__all__ = [
    # Registry models
    "Category",
    "Bucket",
    "ItemMeta",
    "RegistryItem",
    "Registry",

    # Config models
    "Config",

    # Result models
    "Advisory",
    "FileStatus",
    "FileOutcome",
    "CopyResult",
    "InstallEntry",
]
