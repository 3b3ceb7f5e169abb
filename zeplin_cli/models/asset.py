"""Asset models - exportable images attached to a screen version."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AssetFormat(str, Enum):
    """Formats the classifier picks between."""
    SVG = "svg"  # vector
    PNG = "png"  # raster


@dataclass(frozen=True)
class AssetContent:
    """One downloadable variant of an asset."""

    url: str
    format: str
    density: float | None = None  # None for vector formats

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssetContent":
        return cls(url=data.get("url", ""), format=data.get("format", ""), density=data.get("density"))


@dataclass(frozen=True)
class Asset:
    """An exportable asset. Display names are not guaranteed unique."""

    display_name: str
    contents: list[AssetContent] = field(default_factory=list)
    layer_name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Asset":
        return cls(
            display_name=data.get("display_name", ""),
            contents=[AssetContent.from_dict(c) for c in data.get("contents") or []],
            layer_name=data.get("layer_name"),
        )


@dataclass(frozen=True)
class ClassifiedAsset:
    """An asset with its role, format and single content variant decided."""

    display_name: str
    file_name: str                 # unique within one classification run
    format: AssetFormat
    is_icon: bool
    content: AssetContent
