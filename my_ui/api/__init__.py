"""Public API for my-ui"""

from .exceptions import MyUiError, ManifestError, UserCancelledError

__all__ = [
    "MyUiError",
    "ManifestError",
    "UserCancelledError",
]
