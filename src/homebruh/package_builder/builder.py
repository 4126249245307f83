"""
Builds a `.bpkg` archive from a directory holding a `bruh.toml`.
"""

import logging
import pathlib
import tarfile

from homebruh.bruh_exceptions import FilesystemError, ManifestNotFound
from homebruh.bruh_logger import BruhLogger
from homebruh.package_downloader import compute_digest
from homebruh.package_lifecycle.lifecycle import PACKAGE_FILE_SUFFIX
from homebruh.package_models import MANIFEST_FILE_NAME, PackageManifest, parse_manifest


class PackageBuilder:
    """
    Packs a source directory into `<name>.bpkg`, with the manifest at the
    archive root.
    """

    def __init__(self, logger: BruhLogger):
        self.logger = logger

    def read_manifest(self, source_dir: pathlib.Path) -> PackageManifest:
        manifest_path = source_dir / MANIFEST_FILE_NAME
        if not manifest_path.is_file():
            raise ManifestNotFound(MANIFEST_FILE_NAME)
        return parse_manifest(manifest_path.read_bytes())

    def build(self, source_dir: pathlib.Path) -> pathlib.Path:
        """
        Returns:
            Path of the written archive
        """
        source_dir = pathlib.Path(source_dir)
        manifest = self.read_manifest(source_dir)
        output = source_dir / f"{manifest.name}{PACKAGE_FILE_SUFFIX}"

        self.logger.log(f"Building {manifest.name} v{manifest.version}", logging.INFO)
        try:
            with tarfile.open(output, mode="w:gz") as archive:
                for entry in sorted(source_dir.iterdir()):
                    if entry == output:
                        continue
                    archive.add(entry, arcname=entry.name)
        except (OSError, tarfile.TarError) as e:
            output.unlink(missing_ok=True)
            raise FilesystemError(f"Cannot build {output}: {e}") from e

        digest = compute_digest(output.read_bytes())
        self.logger.log(f"Successfully built {output} (sha256 {digest})", logging.INFO)
        return output
