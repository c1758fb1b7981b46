# my_ui/utils/file_utils.py
"""File operation utilities"""

import shutil
from pathlib import Path
from typing import Tuple


def ensure_directory(directory: Path) -> Path:
    """
    Create directory (and parents) if missing

    Args:
        directory: Directory path

    Returns:
        The directory path
    """
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def split_relative_path(relative_path: str) -> Tuple[str, str]:
    """
    Split a manifest path into (subdirectory, filename)

    Manifest paths always use forward slashes.

    Args:
        relative_path: Path such as ``ui/modal/modal.tsx``

    Returns:
        Tuple of subdirectory (may be empty) and filename
    """
    parts = relative_path.split("/")
    filename = parts.pop()
    return "/".join(parts), filename


def copy_file(src: Path, dst: Path, chunk_size: int = 1024 * 1024) -> int:
    """
    Copy file contents byte for byte

    Args:
        src: Source file
        dst: Destination file (replaced if present)
        chunk_size: Copy chunk size

    Returns:
        Number of bytes written
    """
    bytes_copied = 0

    with open(src, 'rb') as fsrc:
        with open(dst, 'wb') as fdst:
            while chunk := fsrc.read(chunk_size):
                fdst.write(chunk)
                bytes_copied += len(chunk)

    # Copy file permissions
    shutil.copymode(src, dst)

    return bytes_copied
