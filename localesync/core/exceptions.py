"""localesync – Exceptions raised by the file-system layers.

The tree algorithms themselves never raise.
"""

from __future__ import annotations

from pathlib import Path


class LocaleSyncError(Exception):
    """Base class for locale sync failures."""
    pass


class LocaleDirectoryNotFoundError(LocaleSyncError):
    """Raised when the configured locales directory does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Unable to find a valid directory at {self.path}")


class LocaleLoadError(LocaleSyncError):
    """Raised when a locale document cannot be read or parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load {self.path}: {reason}")
