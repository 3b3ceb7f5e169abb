"""Asset classification - decide icon role, format and content variant per asset."""

import logging
import re
from typing import Callable, TypeVar

from ..formatters.style import format_number
from ..models import Asset, AssetContent, AssetFormat, ClassifiedAsset
from ..utils import sanitize_file_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

# choose(message, [(label, value), ...]) -> value
Chooser = Callable[[str, list[tuple[str, T]]], T]

# Naming-convention heuristic. "icon" anywhere also matches names like
# "iconography_label"; that over-match is accepted.
ICON_PATTERNS = [
    re.compile(r"icon", re.IGNORECASE),
    re.compile(r"^ic_", re.IGNORECASE),
    re.compile(r"^ico", re.IGNORECASE),
    re.compile(r"^ic-", re.IGNORECASE),
]

# With at least this many density-bearing variants, only @2x is auto-picked.
EXACT_DENSITY_THRESHOLD = 3
PREFERRED_DENSITY = 2

FALLBACK_FILE_NAME = "asset"


class _PromptNeeded:
    """Sentinel: several density variants and none is @2x."""

    def __repr__(self) -> str:
        return "PROMPT_NEEDED"


PROMPT_NEEDED = _PromptNeeded()


def is_icon(display_name: str) -> bool:
    """Guess from the display name whether the asset is a UI icon."""
    return any(pattern.search(display_name) for pattern in ICON_PATTERNS)


def make_unique_file_name(base_name: str, used_names: set[str]) -> str:
    """Claim base_name in used_names, appending _01, _02, ... on collision."""
    if base_name not in used_names:
        used_names.add(base_name)
        return base_name

    suffix = 1
    while f"{base_name}_{suffix:02d}" in used_names:
        suffix += 1

    unique_name = f"{base_name}_{suffix:02d}"
    used_names.add(unique_name)
    return unique_name


def select_content(
    contents: list[AssetContent], target_format: AssetFormat
) -> AssetContent | _PromptNeeded | None:
    """
    Pick the content variant of target_format.

    Returns:
        The chosen content, None if the format is unavailable, or
        PROMPT_NEEDED if the choice must be made by the user.
    """
    format_contents = [c for c in contents if c.format == target_format.value]

    if not format_contents:
        return None

    if len(format_contents) == 1:
        return format_contents[0]

    density_contents = [c for c in format_contents if c.density is not None]

    # Sparse density info: take the highest density available
    if len(density_contents) < EXACT_DENSITY_THRESHOLD:
        ranked = sorted(density_contents, key=lambda c: c.density or 0, reverse=True)
        return ranked[0] if ranked else format_contents[0]

    for content in density_contents:
        if content.density == PREFERRED_DENSITY:
            return content

    return PROMPT_NEEDED


def density_options(contents: list[AssetContent]) -> list[tuple[str, AssetContent]]:
    """Labelled density-bearing variants, ascending by density."""
    with_density = sorted(
        (c for c in contents if c.density is not None),
        key=lambda c: c.density,
    )
    return [(f"@{format_number(c.density)}x ({c.format})", c) for c in with_density]


def classify_assets(
    assets: list[Asset],
    chooser: Chooser,
    used_names: set[str] | None = None,
) -> list[ClassifiedAsset]:
    """
    Classify assets in input order.

    Args:
        assets: Assets of one screen version
        chooser: Asked to pick a density when the choice is ambiguous
        used_names: File names already claimed in this run (mutated)

    Returns:
        One ClassifiedAsset per asset that has content of the required format
    """
    if used_names is None:
        used_names = set()

    result: list[ClassifiedAsset] = []

    for asset in assets:
        icon = is_icon(asset.display_name)
        base_name = sanitize_file_name(asset.display_name) or FALLBACK_FILE_NAME
        file_name = make_unique_file_name(base_name, used_names)

        # Icons prefer vector, everything else is raster only
        formats = [AssetFormat.SVG, AssetFormat.PNG] if icon else [AssetFormat.PNG]

        classified = None
        for target_format in formats:
            content = _resolve_content(asset, target_format, chooser)
            if content is not None:
                classified = ClassifiedAsset(
                    display_name=asset.display_name,
                    file_name=file_name,
                    format=target_format,
                    is_icon=icon,
                    content=content,
                )
                break

        if classified is None:
            logger.info("Skipping %r: no %s content", asset.display_name, "/".join(f.value for f in formats))
            continue

        result.append(classified)

    return result


def _resolve_content(asset: Asset, target_format: AssetFormat, chooser: Chooser) -> AssetContent | None:
    selected = select_content(asset.contents, target_format)
    if selected is not PROMPT_NEEDED:
        return selected

    options = density_options([c for c in asset.contents if c.format == target_format.value])
    return chooser(f'Select the density for asset "{asset.display_name}":', options)
