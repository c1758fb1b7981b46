"""Operation result models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .registry import RegistryItem


@dataclass(frozen=True)
class Advisory:
    """Recoverable problem, reported to the user without aborting"""

    code: str
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class FileStatus(Enum):
    """Outcome of materializing one template file"""
    COPIED = "copied"
    REPLACED = "replaced"
    SKIPPED_EXISTS = "skipped_exists"
    MISSING_SOURCE = "missing_source"
    FAILED = "failed"


@dataclass
class FileOutcome:
    """Result for a single file"""

    source: str  # Template path, as listed in the manifest
    destination: str  # Path relative to the item's destination directory
    status: FileStatus
    target_path: Optional[Path] = None

    @property
    def written(self) -> bool:
        return self.status in (FileStatus.COPIED, FileStatus.REPLACED)


@dataclass
class CopyResult:
    """Result of copying all files of one item"""

    item_name: str
    target_dir: Path
    files: List[FileOutcome] = field(default_factory=list)
    advisories: List[Advisory] = field(default_factory=list)

    @property
    def written_count(self) -> int:
        return sum(1 for f in self.files if f.written)

    def add_file(self, outcome: FileOutcome) -> None:
        self.files.append(outcome)

    def add_advisory(self, advisory: Advisory) -> None:
        self.advisories.append(advisory)


@dataclass(frozen=True)
class InstallEntry:
    """An item scheduled by a batch install"""

    item: RegistryItem
    is_dependency: bool = False

    @property
    def name(self) -> str:
        return self.item.name
