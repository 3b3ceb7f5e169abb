"""API clients for external services."""

from .assets import AssetClient, AssetDownloadError
from .zeplin import ZeplinApiError, ZeplinClient, api_error_message

__all__ = ["AssetClient", "AssetDownloadError", "ZeplinApiError", "ZeplinClient", "api_error_message"]
