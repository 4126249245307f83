"""
Package data models for homebruh.

This package provides Pydantic data models for the two documents homebruh
consumes: the package manifest shipped inside every archive (`bruh.toml`)
and the catalog entry describing where to download a package from.
"""

from .manifest import (
    MANIFEST_FILE_NAME,
    PackageManifest,
    parse_manifest,
)
from .catalog_entry import (
    CatalogEntry,
    parse_catalog_entry,
)

__all__ = [
    # Manifest
    "MANIFEST_FILE_NAME",
    "PackageManifest",
    "parse_manifest",
    # Catalog
    "CatalogEntry",
    "parse_catalog_entry",
]
