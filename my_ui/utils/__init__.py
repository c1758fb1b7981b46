"""Utility functions for my-ui"""

from .file_utils import (
    ensure_directory,
    split_relative_path,
    copy_file,
)

__all__ = [
    "ensure_directory",
    "split_relative_path",
    "copy_file",
]
