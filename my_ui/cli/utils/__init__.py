"""CLI utility functions"""

from .output import (
    console,
    print_error,
    print_warning,
    print_success,
)
from .interactive import (
    confirm,
    prompt_config,
    select_items,
    select_framework,
)

__all__ = [
    # Output utilities
    'console',
    'print_error',
    'print_warning',
    'print_success',

    # Prompt utilities
    'confirm',
    'prompt_config',
    'select_items',
    'select_framework',
]
