"""File materializer: copies an item's template files into the project"""

import logging
from pathlib import Path
from typing import Union

from ..constants import DEFAULT_TEMPLATES_DIR, EXAMPLE_MARKER, ErrorCode
from ..models.config import Config
from ..models.registry import Category, RegistryItem
from ..models.result import Advisory, CopyResult, FileOutcome, FileStatus
from ..utils.file_utils import copy_file, ensure_directory, split_relative_path


def destination_filename(item: RegistryItem, filename: str) -> str:
    """Name a template file gets in the consumer project

    Test config templates ship as e.g. ``vitest.config.example.ts`` and are
    installed as ``vitest.config.ts``. Other categories keep their names.
    """
    if item.category is Category.TEST and EXAMPLE_MARKER in filename:
        return filename.replace(EXAMPLE_MARKER, ".", 1)
    return filename


class FileMaterializer:
    """Copy registry items from the template tree into a consumer project

    Copies are file-granular and best effort: a missing template, an
    existing destination or a failed write is recorded as an advisory and
    the remaining files are still processed. Nothing written is rolled back.
    """

    def __init__(self,
                 templates_dir: Union[str, Path],
                 project_root: Union[str, Path, None] = None):
        self.templates_dir = Path(templates_dir)
        self.project_root = Path(project_root or Path.cwd())
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_target_dir(self, item: RegistryItem, config: Config) -> Path:
        """Destination directory for an item's category"""
        return self.project_root / config.target_dir(item.category)

    def copy_files(self,
                   item: RegistryItem,
                   config: Config,
                   overwrite: bool = False) -> CopyResult:
        """
        Copy all files of an item

        Args:
            item: Registry item to materialize
            config: Consumer configuration (read only)
            overwrite: Replace destination files that already exist

        Returns:
            CopyResult with one outcome per file
        """
        target_dir = self.get_target_dir(item, config)
        ensure_directory(target_dir)

        result = CopyResult(item_name=item.name, target_dir=target_dir)

        for file in item.files:
            relative_dir, filename = split_relative_path(file)
            filename = destination_filename(item, filename)

            destination = f"{relative_dir}/{filename}" if relative_dir else filename
            source_path = self.templates_dir / file
            target_folder = target_dir / relative_dir if relative_dir else target_dir
            target_path = target_folder / filename

            if not source_path.is_file():
                self.logger.debug(f"Template missing: {source_path}")
                result.add_file(FileOutcome(file, destination, FileStatus.MISSING_SOURCE))
                result.add_advisory(Advisory(
                    code=ErrorCode.TEMPLATE_NOT_FOUND,
                    message=f"File not found: {file}",
                    path=file,
                ))
                continue

            try:
                ensure_directory(target_folder)
            except OSError as e:
                self._record_failure(result, file, destination, target_path, e)
                continue

            if target_path.exists() and not overwrite:
                self.logger.debug(f"Keeping existing file: {target_path}")
                result.add_file(
                    FileOutcome(file, destination, FileStatus.SKIPPED_EXISTS, target_path)
                )
                result.add_advisory(Advisory(
                    code=ErrorCode.FILE_ALREADY_EXISTS,
                    message=f"File already exists: {destination}",
                    path=destination,
                ))
                continue

            status = FileStatus.REPLACED if target_path.exists() else FileStatus.COPIED
            try:
                size = copy_file(source_path, target_path)
            except OSError as e:
                self._record_failure(result, file, destination, target_path, e)
                continue
            self.logger.debug(f"{status.value}: {source_path} -> {target_path} ({size} bytes)")
            result.add_file(FileOutcome(file, destination, status, target_path))

        return result

    def _record_failure(self,
                        result: CopyResult,
                        file: str,
                        destination: str,
                        target_path: Path,
                        error: OSError) -> None:
        self.logger.debug(f"Could not write {target_path}: {error}")
        result.add_file(FileOutcome(file, destination, FileStatus.FAILED, target_path))
        result.add_advisory(Advisory(
            code=ErrorCode.FILE_WRITE_FAILED,
            message=f"Could not write {destination}: {error.strerror or error}",
            path=destination,
        ))


def copy_files(item: RegistryItem,
               config: Config,
               overwrite: bool = False,
               templates_dir: Union[str, Path, None] = None,
               project_root: Union[str, Path, None] = None) -> CopyResult:
    """Copy an item's files using the bundled template tree by default"""
    if templates_dir is None:
        templates_dir = DEFAULT_TEMPLATES_DIR
    return FileMaterializer(templates_dir, project_root).copy_files(item, config, overwrite)
