"""CLI decorators"""

from .registry import require_registry, load_registry_or_exit

__all__ = [
    'require_registry',
    'load_registry_or_exit',
]
