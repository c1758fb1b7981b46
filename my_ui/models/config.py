"""Consumer project configuration model"""

from dataclasses import dataclass, fields
from typing import Dict, Any

from .registry import Category
from ..constants import DEFAULT_CONFIG


@dataclass
class Config:
    """Destination directories, relative to the consumer project root"""

    components: str = DEFAULT_CONFIG["components"]
    hooks: str = DEFAULT_CONFIG["hooks"]
    utils: str = DEFAULT_CONFIG["utils"]
    tests: str = DEFAULT_CONFIG["tests"]

    def target_dir(self, category: Category) -> str:
        """Get destination directory for an item category"""
        targets = {
            Category.UI: self.components,
            Category.HOOKS: self.hooks,
            Category.LIB: self.utils,
            Category.TEST: self.tests,
        }
        return targets[category]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary, keeping defaults for absent or non-string keys"""
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if isinstance(value, str):
                values[f.name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            "components": self.components,
            "hooks": self.hooks,
            "utils": self.utils,
            "tests": self.tests,
        }
