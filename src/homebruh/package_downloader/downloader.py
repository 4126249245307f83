"""
Package downloader implementation.

Turns a package name into verified archive bytes using the catalog entry
cached by sync.
"""

import logging

from homebruh.bruh_exceptions import PackageNotFound
from homebruh.bruh_logger import BruhLogger
from homebruh.package_downloader.fetcher import Fetcher
from homebruh.package_downloader.integrity import verify
from homebruh.package_models import CatalogEntry, parse_catalog_entry
from homebruh.package_store import ContentStore


class DownloadStatus:
    """Enumeration of download statuses."""

    PENDING = "pending"
    FETCHED = "fetched"
    VERIFIED = "verified"
    FAILED = "failed"


class DownloadPlan:
    """
    A plan to download a specific package.

    Captures the catalog entry and the progress of its download.
    """

    def __init__(self, package_name: str, entry: CatalogEntry):
        self.package_name = package_name
        self.entry = entry
        self.status = DownloadStatus.PENDING

    @property
    def url(self) -> str:
        return self.entry.link

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(package={self.package_name}, "
            f"status={self.status}, url={self.url})"
        )


class PackageDownloader:
    """
    Downloads package archives and verifies them before handing the bytes on.
    """

    def __init__(
        self,
        store: ContentStore,
        fetcher: Fetcher,
        logger: BruhLogger,
    ):
        """
        Initialize the package downloader.

        Args:
            store: Content store used to locate cached catalog entries
            fetcher: Fetcher used for the archive download
            logger: Logger for progress and error messages
        """
        self.store = store
        self.fetcher = fetcher
        self.logger = logger

    def create_download_plan(self, package_name: str) -> DownloadPlan:
        """
        Read the cached catalog entry for `package_name`.

        Raises:
            PackageNotFound: no catalog entry is cached for the package
            InvalidCatalogEntry: the entry lacks `link` or `sha256`
        """
        path = self.store.catalog_entry_path(package_name)
        if not self.store.has_catalog_entry(package_name):
            raise PackageNotFound(f"target not found: {path}")
        return DownloadPlan(package_name, parse_catalog_entry(path.read_bytes()))

    def download_package(self, package_name: str) -> bytes:
        """
        Download and verify the archive of `package_name`.

        Returns:
            The archive bytes, only once they match the catalog digest
        """
        plan = self.create_download_plan(package_name)
        return self.download(plan)

    def download(self, plan: DownloadPlan) -> bytes:
        self.logger.log(
            f"Downloading {plan.package_name} from {plan.url}",
            logging.INFO,
        )
        try:
            data = self.fetcher.fetch(plan.url)
            plan.status = DownloadStatus.FETCHED
            verify(data, plan.entry.sha256)
        except Exception:
            plan.status = DownloadStatus.FAILED
            raise
        plan.status = DownloadStatus.VERIFIED

        self.logger.log(
            f"Successfully downloaded {plan.package_name} ({len(data)} bytes)",
            logging.INFO,
        )
        return data
