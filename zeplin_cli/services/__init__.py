"""Business logic services."""

from .asset_classifier import classify_assets
from .asset_downloader import AssetDownloader, download_all_assets
from .layout import infer_layout

__all__ = ["AssetDownloader", "classify_assets", "download_all_assets", "infer_layout"]
