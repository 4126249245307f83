"""
Content store implementation.

The filesystem is the only record of what is installed: a package is
installed when its directory exists. Every existence check goes through
ContentStore so that call sites never inspect the layout directly.
"""

import os
import pathlib

from homebruh.bruh_config import BruhConfig
from homebruh.bruh_exceptions import FilesystemError, InvalidPackageName
from homebruh.package_models import MANIFEST_FILE_NAME, PackageManifest


class ContentStore:
    """
    Resolves paths under the data root.

    Layout:
        <data_dir>/packages/<name>.toml   cached catalog entries
        <data_dir>/packages/<name>/       installed package trees
        <data_dir>/bin/<export>           symlinks into installed packages
    """

    def __init__(self, config: BruhConfig):
        self.root = pathlib.Path(config.data_dir).absolute()

    @property
    def packages_dir(self) -> pathlib.Path:
        return self.root / "packages"

    @property
    def bin_dir(self) -> pathlib.Path:
        return self.root / "bin"

    def package_dir(self, name: str) -> pathlib.Path:
        """Directory an installed package lives in."""
        self._check_name(name)
        return self.packages_dir / name

    def manifest_path(self, name: str) -> pathlib.Path:
        return self.package_dir(name) / MANIFEST_FILE_NAME

    def catalog_entry_path(self, name: str) -> pathlib.Path:
        self._check_name(name)
        return self.packages_dir / f"{name}.toml"

    def resolve(self, name: str, relative_path: str) -> pathlib.Path:
        """Resolve a manifest-relative path (a script) inside the package."""
        return self.package_dir(name) / relative_path

    def export_target(self, name: str, manifest: PackageManifest, export: str) -> pathlib.Path:
        """The file inside the package an export link points at."""
        return self.package_dir(name) / manifest.files / export

    def export_link(self, export: str) -> pathlib.Path:
        """The symlink in the shared bin directory for an export."""
        return self.bin_dir / pathlib.PurePath(export).name

    def is_installed(self, name: str) -> bool:
        return self.package_dir(name).is_dir()

    def has_catalog_entry(self, name: str) -> bool:
        return self.catalog_entry_path(name).is_file()

    def ensure_layout(self) -> None:
        """Create the packages and bin directories when missing."""
        try:
            self.packages_dir.mkdir(parents=True, exist_ok=True)
            self.bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Cannot create data directories under {self.root}: {e}") from e

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or name in (".", "..") or "/" in name or os.sep in name:
            raise InvalidPackageName(f"Invalid package name `{name}`.")
