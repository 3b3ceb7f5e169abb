"""Asset download service - fetch, optionally re-encode, and write classified assets."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from ..clients.assets import AssetClient
from ..config import WEBP_QUALITY
from ..formatters.style import format_number
from ..models import AssetFormat, ClassifiedAsset, DownloadResult
from .image import CODEC_EXTENSIONS, reencode as pillow_reencode

logger = logging.getLogger(__name__)

# Non-icon rasters are re-encoded to this codec
RASTER_CODEC = "WEBP"


def output_file_name(asset: ClassifiedAsset) -> str:
    """File name written for an asset: vector as-is, icon raster as-is, other rasters re-encoded."""
    if asset.format == AssetFormat.SVG:
        return f"{asset.file_name}.svg"
    if asset.is_icon:
        return f"{asset.file_name}.png"
    return f"{asset.file_name}.{CODEC_EXTENSIONS[RASTER_CODEC]}"


class AssetDownloader:
    """Write classified assets into a directory, isolating per-asset failures."""

    def __init__(
        self,
        fetch: Callable[[str], bytes] | None = None,
        reencode: Callable[[bytes, str, int], bytes] | None = None,
        quality: int = WEBP_QUALITY,
    ):
        self.fetch = fetch or AssetClient().fetch
        self.reencode = reencode or pillow_reencode
        self.quality = quality

    def download_all(
        self, assets: list[ClassifiedAsset], output_dir: str | Path, workers: int = 1
    ) -> DownloadResult:
        """
        Download every asset into output_dir.

        A failure for one asset is recorded and does not stop the others.

        Args:
            assets: Classified assets, in the order to report them
            output_dir: Target directory (created if missing)
            workers: Parallel downloads; results keep input order either way

        Returns:
            DownloadResult with success and failed lists
        """
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)

        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                outcomes = list(executor.map(lambda a: self._try_process(a, out), assets))
        else:
            outcomes = [self._try_process(asset, out) for asset in assets]

        result = DownloadResult()
        for asset, (path, error) in zip(assets, outcomes):
            file_name = output_file_name(asset)
            if error is None:
                result.mark_success(file_name, str(path))
                print(f"  ✓ {file_name}{_density_label(asset)}", flush=True)
            else:
                result.mark_failed(file_name, error)
                print(f"  ✗ {asset.file_name}: {error}", flush=True)

        return result

    def _try_process(self, asset: ClassifiedAsset, output_dir: Path) -> tuple[Path | None, str | None]:
        try:
            return self._process(asset, output_dir), None
        except Exception as e:
            logger.debug("Download of %s failed", asset.file_name, exc_info=True)
            return None, str(e) or e.__class__.__name__

    def _process(self, asset: ClassifiedAsset, output_dir: Path) -> Path:
        data = self.fetch(asset.content.url)
        path = output_dir / output_file_name(asset)

        if asset.format == AssetFormat.PNG and not asset.is_icon:
            data = self.reencode(data, RASTER_CODEC, self.quality)

        path.write_bytes(data)
        return path


def download_all_assets(
    assets: list[ClassifiedAsset],
    output_dir: str | Path,
    fetch: Callable[[str], bytes] | None = None,
    reencode: Callable[[bytes, str, int], bytes] | None = None,
    workers: int = 1,
    quality: int = WEBP_QUALITY,
) -> DownloadResult:
    """Convenience wrapper around AssetDownloader.download_all."""
    downloader = AssetDownloader(fetch=fetch, reencode=reencode, quality=quality)
    return downloader.download_all(assets, output_dir, workers=workers)


def _density_label(asset: ClassifiedAsset) -> str:
    if asset.content.density is None:
        return ""
    return f" (@{format_number(asset.content.density)}x)"
