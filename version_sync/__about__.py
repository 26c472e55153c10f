"""Release metadata for `version_sync`.

Kept free of imports so packaging tools can read the version without
importing the rest of the package.
"""

__all__ = ["__title__", "__version__"]

#: Distribution name as published.
__title__ = "version-sync"

#: Semantic version of the package.
__version__ = "1.0.0"
