"""
Package downloader.

This package handles:
1. Fetching bytes over HTTP
2. Verifying downloads against the catalog digest
3. Resolving a package name to verified archive bytes
"""

from .fetcher import Fetcher
from .integrity import compute_digest, verify
from .downloader import PackageDownloader

__all__ = ["Fetcher", "PackageDownloader", "compute_digest", "verify"]
