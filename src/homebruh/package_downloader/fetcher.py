"""
HTTP fetcher.
"""

import logging
from typing import Optional

import requests

from homebruh.bruh_exceptions import NetworkError
from homebruh.bruh_logger import BruhLogger


class Fetcher:
    """
    Retrieves raw bytes over HTTP. No retries; callers do not distinguish a
    missing resource from an unreachable host.
    """

    def __init__(self, logger: BruhLogger, timeout: Optional[float] = None):
        self.logger = logger
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """
        Fetch `url` and return the response body.

        Raises:
            NetworkError: on transport failure or a non-2xx response
        """
        self.logger.log(f"Fetching {url}", logging.DEBUG)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e
        return response.content
