# my_ui/cli/commands/__init__.py
"""CLI commands"""

from . import init
from . import listing
from . import add
from . import info
from . import setup_tests

__all__ = [
    "init",
    "listing",
    "add",
    "info",
    "setup_tests",
]
