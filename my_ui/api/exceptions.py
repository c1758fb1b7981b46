"""Exception definitions for my-ui

Only conditions that abort an operation are exceptions. Recoverable
conditions (unknown item, missing template, existing destination file) are
reported as :class:`my_ui.models.result.Advisory` values instead.
"""

from typing import Optional

from ..constants import ErrorCode


class MyUiError(Exception):
    """Base exception for my-ui"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ManifestError(MyUiError):
    """Registry manifest violates its schema

    Fatal: every later step relies on the registry's global invariants, so
    the CLI terminates when this is raised.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            message = f"registry.json: {path}: {message}"
        else:
            message = f"registry.json: {message}"
        super().__init__(message, ErrorCode.MANIFEST_INVALID)
        self.path = path


class UserCancelledError(MyUiError):
    """User cancelled the operation"""

    def __init__(self):
        super().__init__("Operation cancelled by user", ErrorCode.USER_CANCELLED)
