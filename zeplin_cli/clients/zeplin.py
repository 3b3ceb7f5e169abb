"""Zeplin REST API client."""

import logging
import time

import requests

from ..models import Annotation, Screen, ScreenVersion

logger = logging.getLogger(__name__)


def api_error_message(status: int) -> str:
    """Map an HTTP status to a user-facing message."""
    if status == 401:
        return "Authentication failed. Check your ZEPLIN_TOKEN."
    if status == 403:
        return "You do not have permission to access this resource."
    if status == 404:
        return "Screen not found. Check the URL."
    return f"API request failed. (status code: {status})"


class ZeplinApiError(Exception):
    """Zeplin API responded with a non-success status."""

    def __init__(self, status: int):
        self.status = status
        self.message = api_error_message(status)
        super().__init__(self.message)


class ZeplinClient:
    """Client for reading screens, versions and annotations from Zeplin."""

    def __init__(self, token: str, base_url: str = "https://api.zeplin.dev/v1"):
        self.token = token
        self.base_url = base_url.rstrip("/")

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
        }

    def _request_with_retry(
        self,
        url: str,
        params: dict | None = None,
        max_retries: int = 5,
    ) -> requests.Response:
        """Make GET request with exponential backoff on 429 errors."""
        response = None
        for attempt in range(max_retries):
            response = requests.get(url, params=params, headers=self._get_headers(), timeout=30)

            if response.status_code == 429:
                wait_time = 2 ** attempt
                logger.info("Rate limited on %s, retrying in %ss", url, wait_time)
                time.sleep(wait_time)
                continue

            return response

        return response

    def _get_json(self, path: str, params: dict | None = None):
        response = self._request_with_retry(f"{self.base_url}{path}", params=params)
        if not response.ok:
            raise ZeplinApiError(response.status_code)
        return response.json()

    def get_screen(self, project_id: str, screen_id: str) -> Screen:
        """Fetch screen metadata."""
        data = self._get_json(f"/projects/{project_id}/screens/{screen_id}")
        return Screen.from_dict(data)

    def get_latest_screen_version(self, project_id: str, screen_id: str) -> ScreenVersion:
        """Fetch the latest version of a screen (layers, assets, links)."""
        data = self._get_json(f"/projects/{project_id}/screens/{screen_id}/versions/latest")
        return ScreenVersion.from_dict(data)

    def get_screen_annotations(self, project_id: str, screen_id: str) -> list[Annotation]:
        """Fetch annotations placed on a screen."""
        data = self._get_json(f"/projects/{project_id}/screens/{screen_id}/annotations")
        return [Annotation.from_dict(item) for item in data]

    def get_project_screens(
        self, project_id: str, limit: int | None = None, offset: int | None = None
    ) -> list[dict]:
        """
        List screens of a project.

        Args:
            project_id: Project ID
            limit: Max number of screens to return
            offset: Pagination offset

        Returns:
            Raw screen dicts as returned by the API
        """
        params = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        return self._get_json(f"/projects/{project_id}/screens", params=params or None)
