"""Registry data models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Any, Tuple

from ..constants import TEST_FILE_MARKER


class Category(Enum):
    """Item categories, each mapped to one destination directory"""
    TEST = "test"
    UI = "ui"
    HOOKS = "hooks"
    LIB = "lib"


class Bucket(Enum):
    """Top-level buckets of the manifest's ``items`` object"""
    TEST_CONFIGS = "test-configs"
    COMPONENTS = "components"
    HOOKS = "hooks"
    UTILS = "utils"

    @property
    def category(self) -> Category:
        """Category every item stored in this bucket must declare"""
        return BUCKET_CATEGORIES[self]

    @property
    def label(self) -> str:
        """Human readable bucket title"""
        return BUCKET_LABELS[self]


BUCKET_CATEGORIES: Dict[Bucket, Category] = {
    Bucket.TEST_CONFIGS: Category.TEST,
    Bucket.COMPONENTS: Category.UI,
    Bucket.HOOKS: Category.HOOKS,
    Bucket.UTILS: Category.LIB,
}

BUCKET_LABELS: Dict[Bucket, str] = {
    Bucket.TEST_CONFIGS: "Test configs",
    Bucket.COMPONENTS: "Components",
    Bucket.HOOKS: "Hooks",
    Bucket.UTILS: "Utilities",
}


@dataclass(frozen=True)
class ItemMeta:
    """Lifecycle annotations of an item"""
    since: str
    deprecated: Optional[str] = None
    breaking: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        data = {'since': self.since}
        if self.deprecated is not None:
            data['deprecated'] = self.deprecated
        if self.breaking is not None:
            data['breaking'] = self.breaking
        return data


@dataclass(frozen=True)
class RegistryItem:
    """A distributable unit: component, hook, utility or test config"""
    name: str
    description: str
    category: Category
    files: Tuple[str, ...] = ()
    dependencies: Tuple[str, ...] = ()
    meta: ItemMeta = field(default_factory=lambda: ItemMeta(since="0.0.0"))

    @property
    def is_deprecated(self) -> bool:
        return self.meta.deprecated is not None

    @property
    def has_tests(self) -> bool:
        """Whether any of the item's files is a test file"""
        return any(TEST_FILE_MARKER in path for path in self.files)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in manifest layout"""
        return {
            'name': self.name,
            'description': self.description,
            'category': self.category.value,
            'files': list(self.files),
            'dependencies': list(self.dependencies),
            'meta': self.meta.to_dict(),
        }


@dataclass(frozen=True)
class Registry:
    """Validated registry manifest

    Built only by :func:`my_ui.core.manifest_engine.validate_registry`, so
    item names are unique and every dependency resolves. Buckets are stored
    as a tuple of ``(bucket, items)`` pairs in :class:`Bucket` order, which
    keeps the registry immutable and hashable.
    """
    name: str
    version: str
    items: Tuple[Tuple[Bucket, Tuple[RegistryItem, ...]], ...] = ()

    def __post_init__(self):
        if isinstance(self.items, Mapping):
            buckets = tuple(
                (bucket, tuple(self.items.get(bucket, ()))) for bucket in Bucket
            )
            object.__setattr__(self, "items", buckets)

    def bucket(self, bucket: Bucket) -> Tuple[RegistryItem, ...]:
        """Items stored in one bucket"""
        for key, items in self.items:
            if key is bucket:
                return items
        return ()

    def all_items(self, include_test_configs: bool = False) -> List[RegistryItem]:
        """All installable items

        Test configs are installed through ``setup-tests`` and are left out
        unless asked for.
        """
        items: List[RegistryItem] = []
        for bucket in (Bucket.COMPONENTS, Bucket.HOOKS, Bucket.UTILS):
            items.extend(self.bucket(bucket))
        if include_test_configs:
            items.extend(self.bucket(Bucket.TEST_CONFIGS))
        return items

    def find_item(self, name: str) -> Optional[RegistryItem]:
        """Find an item by name in any bucket"""
        for item in self.all_items(include_test_configs=True):
            if item.name == name:
                return item
        return None

    def __contains__(self, name: str) -> bool:
        return self.find_item(name) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in manifest layout"""
        return {
            'name': self.name,
            'version': self.version,
            'items': {
                bucket.value: [item.to_dict() for item in self.bucket(bucket)]
                for bucket in Bucket
            },
        }
