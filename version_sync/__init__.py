"""Top-level package for `version_sync`.

Exposes the package version and the synchronization entry point.
"""

from .__about__ import __version__
from .errors import ParseError, SchemaError, StorageError, VersionSyncError
from .sync import SyncResult, synchronize_version

__all__ = [
    "ParseError",
    "SchemaError",
    "StorageError",
    "SyncResult",
    "VersionSyncError",
    "__version__",
    "synchronize_version",
]
