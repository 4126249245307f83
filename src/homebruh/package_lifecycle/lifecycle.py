"""
Lifecycle engine implementation.

Install runs extract -> read manifest -> startup script -> exports -> cleanup
script. Any failure after extraction removes everything staged so far, so a
failed install leaves either nothing or a fully installed package on disk.
Uninstall reads the manifest, removes exports best-effort and deletes the
package directory.
"""

import logging
import os
import pathlib
import shutil
from typing import List, Optional

from homebruh.bruh_exceptions import (
    FileNotFound,
    FilesystemError,
    ManifestError,
    ManifestNotFound,
    PackageAlreadyInstalled,
    PackageNotInstalled,
)
from homebruh.bruh_logger import BruhLogger
from homebruh.package_downloader import PackageDownloader
from homebruh.package_lifecycle.archive import extract
from homebruh.package_lifecycle.scripts import run_script
from homebruh.package_models import MANIFEST_FILE_NAME, PackageManifest, parse_manifest
from homebruh.package_store import ContentStore

PACKAGE_FILE_SUFFIX = ".bpkg"


def package_name_from_file(file_name: str) -> str:
    """`path/to/demo.bpkg` -> `demo`"""
    name = pathlib.PurePath(file_name).name
    if name.endswith(PACKAGE_FILE_SUFFIX):
        name = name[: -len(PACKAGE_FILE_SUFFIX)]
    return name


class InstallState:
    """Enumeration of install states, in the order they are reached."""

    FETCHED = "fetched"
    VERIFIED = "verified"
    EXTRACTED = "extracted"
    MANIFEST_PARSED = "manifest_parsed"
    MANIFEST_VALIDATED = "manifest_validated"
    STARTUP_RUN = "startup_run"
    EXPORTED = "exported"
    CLEANUP_RUN = "cleanup_run"
    INSTALLED = "installed"
    FAILED = "failed"


class InstallPlan:
    """
    Tracks a single install: where it is going, how far it got and which
    exports it created, so that rollback knows what to undo.
    """

    def __init__(
            self,
            package_name: str,
            destination_path: pathlib.Path,
            state: str = InstallState.VERIFIED,
    ):
        self.package_name = package_name
        self.destination_path = destination_path
        self.state = state
        self.manifest: Optional[PackageManifest] = None
        self.created_exports: List[pathlib.Path] = []
        self.error_message: Optional[str] = None

    def advance(self, state: str) -> None:
        self.state = state

    def is_installed(self) -> bool:
        return self.state == InstallState.INSTALLED

    def __repr__(self) -> str:
        return (
            f"InstallPlan(package={self.package_name}, "
            f"state={self.state}, path={self.destination_path})"
        )


class LifecycleEngine:
    """
    Installs and uninstalls packages under a ContentStore.
    """

    def __init__(
        self,
        store: ContentStore,
        downloader: PackageDownloader,
        logger: BruhLogger,
    ):
        """
        Initialize the lifecycle engine.

        Args:
            store: Content store deciding every path the engine touches
            downloader: Downloader used by install_remote
            logger: Logger for progress and error messages
        """
        self.store = store
        self.downloader = downloader
        self.logger = logger

    def install_remote(self, package_name: str) -> InstallPlan:
        """
        Download, verify and install `package_name` from its cached catalog entry.
        Nothing is extracted unless the download matches its digest.
        """
        self._check_not_installed(package_name)
        data = self.downloader.download_package(package_name)
        return self.install(data, package_name)

    def install_from_file(self, file_name: str) -> InstallPlan:
        """
        Install a local package archive. Its contents are trusted as-is.
        """
        path = pathlib.Path(file_name)
        if not path.is_file():
            raise FileNotFound(file_name)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FilesystemError(f"Cannot read `{file_name}`: {e}") from e
        return self.install(data, package_name_from_file(file_name))

    def install(self, data: bytes, package_name: str) -> InstallPlan:
        """
        Install verified archive bytes as `package_name`.

        Returns:
            The completed InstallPlan

        Raises:
            BruhException: whatever step failed, after rollback
        """
        self._check_not_installed(package_name)
        self.store.ensure_layout()
        plan = InstallPlan(package_name, self.store.package_dir(package_name))

        try:
            self._run_install(plan, data)
        except Exception as e:
            plan.advance(InstallState.FAILED)
            plan.error_message = str(e)
            self._rollback(plan)
            raise

        plan.advance(InstallState.INSTALLED)
        self.logger.log(
            f"Successfully installed {plan.manifest.name} v{plan.manifest.version}",
            logging.INFO,
        )
        return plan

    def _run_install(self, plan: InstallPlan, data: bytes) -> None:
        name = plan.package_name

        self.logger.log(f"Decompressing `{name}`...", logging.INFO)
        extract(data, plan.destination_path)
        plan.advance(InstallState.EXTRACTED)
        self.logger.log(f"Successfully decompressed `{name}`.", logging.INFO)

        self.logger.log("Reading manifest information...", logging.INFO)
        manifest = self._read_manifest(name)
        plan.manifest = manifest
        plan.advance(InstallState.MANIFEST_PARSED)
        # parse_manifest rejects missing and mistyped keys
        plan.advance(InstallState.MANIFEST_VALIDATED)

        if manifest.startup_script is not None:
            self.logger.log("Executing startup script...", logging.INFO)
            run_script(self.store.resolve(name, manifest.startup_script), plan.destination_path)
        plan.advance(InstallState.STARTUP_RUN)

        for export in manifest.exports():
            self._create_export(plan, manifest, export)
        plan.advance(InstallState.EXPORTED)

        if manifest.cleanup_script is not None:
            self.logger.log("Executing cleanup script...", logging.INFO)
            run_script(self.store.resolve(name, manifest.cleanup_script), plan.destination_path)
        plan.advance(InstallState.CLEANUP_RUN)

    def _create_export(self, plan: InstallPlan, manifest: PackageManifest, export: str) -> None:
        target = self.store.export_target(plan.package_name, manifest, export).absolute()
        link = self.store.export_link(export)
        if not target.exists():
            raise FileNotFound(str(target))

        self.logger.log(f"Exporting {export} to path", logging.INFO)
        try:
            os.symlink(target, link)
        except OSError as e:
            raise FilesystemError(f"Cannot export `{export}` to {link}: {e}") from e
        plan.created_exports.append(link)

    def _rollback(self, plan: InstallPlan) -> None:
        """
        Remove the exports created by `plan` and its destination directory.
        Errors here are logged; the install error is what the caller sees.
        """
        self.logger.log(
            f"Install of {plan.package_name} failed ({plan.error_message}), rolling back",
            logging.WARNING,
        )
        for link in reversed(plan.created_exports):
            try:
                link.unlink()
            except OSError as e:
                self.logger.log(f"Failed to remove export {link}: {e}", logging.ERROR)

        if plan.destination_path.exists():
            try:
                shutil.rmtree(plan.destination_path)
            except OSError as e:
                self.logger.log(
                    f"Failed to remove {plan.destination_path}: {e}",
                    logging.ERROR,
                )

    def uninstall(self, package_name: str) -> None:
        """
        Remove `package_name` and its exports.

        A package whose manifest is missing or unreadable still has its
        directory deleted before the manifest error is raised.
        """
        if not self.store.is_installed(package_name):
            raise PackageNotInstalled(f"Package `{package_name}` is not installed.")
        destination = self.store.package_dir(package_name)

        self.logger.log("Reading manifest information...", logging.INFO)
        try:
            manifest = self._read_manifest(package_name)
        except ManifestError:
            self.logger.log(
                f"Manifest of {package_name} is unusable, removing {destination}",
                logging.WARNING,
            )
            self._remove_package_dir(destination)
            raise

        for export in manifest.exports():
            self._remove_export(package_name, manifest, export)

        self._remove_package_dir(destination)
        self.logger.log(f"Successfully uninstalled {package_name}", logging.INFO)

    def _remove_export(self, package_name: str, manifest: PackageManifest, export: str) -> None:
        """Best-effort removal of one export link; failures are logged only."""
        link = self.store.export_link(export)
        target = self.store.export_target(package_name, manifest, export)

        if not link.is_symlink():
            self.logger.log(
                f"Failed to remove {export} for reason {link} is not an exported link",
                logging.WARNING,
            )
            return
        if os.path.abspath(os.readlink(link)) != os.path.abspath(target):
            self.logger.log(
                f"Failed to remove {export} for reason {link} belongs to another package",
                logging.WARNING,
            )
            return

        try:
            link.unlink()
        except OSError as e:
            self.logger.log(f"Failed to remove {export} for reason {e}", logging.ERROR)
            return
        self.logger.log(f"Removed {export}", logging.INFO)

    def _read_manifest(self, package_name: str) -> PackageManifest:
        try:
            document = self.store.manifest_path(package_name).read_bytes()
        except FileNotFoundError as e:
            raise ManifestNotFound(MANIFEST_FILE_NAME) from e
        except OSError as e:
            raise FilesystemError(f"Cannot read {MANIFEST_FILE_NAME}: {e}") from e
        return parse_manifest(document)

    def _remove_package_dir(self, destination: pathlib.Path) -> None:
        try:
            shutil.rmtree(destination)
        except OSError as e:
            raise FilesystemError(f"Cannot remove {destination}: {e}") from e

    def _check_not_installed(self, package_name: str) -> None:
        if self.store.is_installed(package_name):
            raise PackageAlreadyInstalled(f"Package `{package_name}` is already installed.")
