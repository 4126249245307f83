"""
On-disk layout of installed packages.

This package handles:
1. Resolving package, catalog entry and export paths under the data root
2. Answering whether a package is installed
"""

from .content_store import ContentStore

__all__ = ["ContentStore"]
