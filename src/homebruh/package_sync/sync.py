"""
Catalog synchronizer implementation.

Fetches the community package list and caches one catalog entry per package
under the packages directory.
"""

import logging
from typing import List

from homebruh.bruh_config import BruhConfig
from homebruh.bruh_exceptions import FilesystemError, InvalidCatalogEntry
from homebruh.bruh_logger import BruhLogger
from homebruh.package_downloader import Fetcher
from homebruh.package_store import ContentStore

PROGRESS_WIDTH = 50


def render_progress(done: int, total: int, width: int = PROGRESS_WIDTH) -> str:
    """`[#####-----] done/total`"""
    filled = done * width // total if total else width
    return f"[{'#' * filled}{'-' * (width - filled)}] {done}/{total}"


class CatalogSynchronizer:
    """
    Synchronizes the local catalog cache with the community sources.
    """

    def __init__(
        self,
        config: BruhConfig,
        store: ContentStore,
        fetcher: Fetcher,
        logger: BruhLogger,
    ):
        self.config = config
        self.store = store
        self.fetcher = fetcher
        self.logger = logger

    def fetch_package_list(self) -> List[str]:
        raw = self.fetcher.fetch(self.config.sources_url)
        self.logger.log("Reading package database", logging.INFO)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidCatalogEntry(
                f"Package list at {self.config.sources_url} is not valid UTF-8: {e}"
            ) from e
        return [line.strip() for line in text.splitlines() if line.strip()]

    def sync(self) -> List[str]:
        """
        Refresh every catalog entry listed by the community sources.

        Returns:
            The package names that were synchronized
        """
        self.store.ensure_layout()
        packages = self.fetch_package_list()

        self.logger.log("Downloading packages manifests.", logging.INFO)
        for i, name in enumerate(packages):
            entry = self.fetcher.fetch(f"{self.config.community_url.rstrip('/')}/{name}.toml")
            path = self.store.catalog_entry_path(name)
            try:
                path.write_bytes(entry)
            except OSError as e:
                raise FilesystemError(f"Cannot write {path}: {e}") from e
            self.logger.log(render_progress(i + 1, len(packages)), logging.INFO)

        self.logger.log("Successfully synchronized package database.", logging.INFO)
        return packages
