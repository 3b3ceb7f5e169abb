"""Asset CDN client - downloads asset content bytes."""

import logging

import requests

logger = logging.getLogger(__name__)


class AssetDownloadError(Exception):
    """Asset URL responded with a non-success status."""

    pass


class AssetClient:
    """Fetch raw asset bytes from content URLs."""

    def __init__(self, timeout: int = 60):
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """
        Download an asset.

        Args:
            url: Content URL

        Returns:
            Response body bytes
        """
        logger.debug("Fetching %s", url)
        response = requests.get(url, timeout=self.timeout)

        if not response.ok:
            raise AssetDownloadError(f"Download failed: {response.status_code} {response.reason}")

        return response.content
