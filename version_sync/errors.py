"""Error taxonomy for version synchronization failures."""

from __future__ import annotations

from pathlib import Path


class VersionSyncError(Exception):
    """Base class for every failure raised while syncing a version."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Store the offending path alongside the message."""
        self.path = Path(path) if path is not None else None
        super().__init__(f"{self.path}: {message}" if self.path else message)


class ParseError(VersionSyncError, ValueError):
    """Raised when a file does not contain valid JSON."""


class SchemaError(VersionSyncError, ValueError):
    """Raised when a record lacks a required field or has the wrong shape."""


class StorageError(VersionSyncError, OSError):
    """Raised when a file cannot be read or written."""


__all__ = ["ParseError", "SchemaError", "StorageError", "VersionSyncError"]
