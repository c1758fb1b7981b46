"""Manifest engine: loads and validates the registry manifest"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any, Sequence, Tuple, Union

from ..api.exceptions import ManifestError
from ..constants import (
    ROOT_KEYS,
    ITEMS_KEYS,
    ITEM_KEYS,
    META_KEYS,
    META_REQUIRED_KEYS,
)
from ..models.registry import Bucket, Category, ItemMeta, Registry, RegistryItem


def _is_record(value: Any) -> bool:
    return isinstance(value, dict)


def _assert_keys(obj: Dict[str, Any],
                 allowed: Sequence[str],
                 path: str,
                 required: Sequence[str] = None) -> None:
    """Reject unexpected keys first, then missing ones"""
    if required is None:
        required = allowed

    for key in obj:
        if key not in allowed:
            raise ManifestError(f"unexpected key '{key}'", path)

    for key in required:
        if key not in obj:
            raise ManifestError(f"missing key '{key}'", path)


def _assert_string(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ManifestError("must be a non-empty string", path)
    return value


def _assert_array(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise ManifestError("must be an array", path)
    return value


def _assert_string_array(value: Any, path: str) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise ManifestError("must be an array of strings", path)
    return tuple(
        _assert_string(entry, f"{path}[{index}]")
        for index, entry in enumerate(value)
    )


class ManifestEngine:
    """Validate registry manifests into :class:`Registry` objects

    Validation is eager and fail-fast: the first violation raises
    :class:`ManifestError` naming the offending path.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self, registry_path: Union[str, Path]) -> Registry:
        """Read and validate a registry manifest file

        Args:
            registry_path: Path to registry.json

        Returns:
            Validated registry
        """
        registry_path = Path(registry_path)
        self.logger.debug(f"Loading registry from {registry_path}")

        try:
            with open(registry_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError:
            raise ManifestError(f"file not found: {registry_path}")
        except (OSError, ValueError) as e:
            raise ManifestError(f"failed to load {registry_path}: {e}")

        return self.validate(raw)

    def validate(self, raw: Any) -> Registry:
        """Validate a parsed manifest document

        Args:
            raw: Parsed JSON value

        Returns:
            Validated registry
        """
        if not _is_record(raw):
            raise ManifestError("root must be an object", "root")

        _assert_keys(raw, ROOT_KEYS, "root")

        name = _assert_string(raw["name"], "name")
        version = _assert_string(raw["version"], "version")

        items = raw["items"]
        if not _is_record(items):
            raise ManifestError("must be an object", "items")
        _assert_keys(items, ITEMS_KEYS, "items")

        raw_buckets = {
            bucket: _assert_array(items[bucket.value], f"items.{bucket.value}")
            for bucket in Bucket
        }

        parsed: Dict[Bucket, Tuple[RegistryItem, ...]] = {}
        for bucket, raw_items in raw_buckets.items():
            list_path = f"items.{bucket.value}"
            parsed[bucket] = tuple(
                self._validate_item(raw_item, f"{list_path}[{index}]", bucket.category)
                for index, raw_item in enumerate(raw_items)
            )

        located = [
            (f"items.{bucket.value}[{index}]", item)
            for bucket in Bucket
            for index, item in enumerate(parsed[bucket])
        ]
        self._check_unique_names(located)
        self._check_dependency_closure(located)

        self.logger.debug(
            f"Registry {name} v{version} validated ({len(located)} items)"
        )

        return Registry(name=name, version=version, items=parsed)

    def _validate_item(self, value: Any, path: str, expected: Category) -> RegistryItem:
        if not _is_record(value):
            raise ManifestError("must be an object", path)

        _assert_keys(value, ITEM_KEYS, path)

        name = _assert_string(value["name"], f"{path}.name")
        description = _assert_string(value["description"], f"{path}.description")
        category = _assert_string(value["category"], f"{path}.category")
        files = _assert_string_array(value["files"], f"{path}.files")
        dependencies = _assert_string_array(value["dependencies"], f"{path}.dependencies")
        meta = self._validate_meta(value["meta"], f"{path}.meta")

        try:
            category_value = Category(category)
        except ValueError:
            raise ManifestError(f"invalid value '{category}'", f"{path}.category")

        if category_value is not expected:
            raise ManifestError(f"must be '{expected.value}'", f"{path}.category")

        return RegistryItem(
            name=name,
            description=description,
            category=category_value,
            files=files,
            dependencies=dependencies,
            meta=meta,
        )

    def _validate_meta(self, value: Any, path: str) -> ItemMeta:
        if not _is_record(value):
            raise ManifestError("must be an object", path)

        _assert_keys(value, META_KEYS, path, META_REQUIRED_KEYS)

        since = _assert_string(value["since"], f"{path}.since")
        deprecated = value.get("deprecated")
        breaking = value.get("breaking")

        if "deprecated" in value:
            _assert_string(deprecated, f"{path}.deprecated")
        if "breaking" in value:
            _assert_string(breaking, f"{path}.breaking")

        return ItemMeta(since=since, deprecated=deprecated, breaking=breaking)

    def _check_unique_names(self, located: List[Tuple[str, RegistryItem]]) -> None:
        seen = set()
        for path, item in located:
            if item.name in seen:
                raise ManifestError(f"duplicate name '{item.name}'", f"{path}.name")
            seen.add(item.name)

    def _check_dependency_closure(self, located: List[Tuple[str, RegistryItem]]) -> None:
        names = {item.name for _, item in located}
        for path, item in located:
            for index, dependency in enumerate(item.dependencies):
                if dependency not in names:
                    raise ManifestError(
                        f"dependency '{dependency}' not found (item: {item.name})",
                        f"{path}.dependencies[{index}]"
                    )


def validate_registry(raw: Any) -> Registry:
    """Validate a parsed manifest document, raising ManifestError on violation"""
    return ManifestEngine().validate(raw)


def load_registry(registry_path: Union[str, Path]) -> Registry:
    """Load and validate a registry manifest file"""
    return ManifestEngine().load(registry_path)
