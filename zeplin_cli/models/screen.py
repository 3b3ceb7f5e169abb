"""Screen, screen version and annotation models."""

from dataclasses import dataclass, field
from typing import Any

from .asset import Asset
from .layer import Color, Layer, Rect


@dataclass
class Screen:
    """Screen metadata."""

    id: str
    name: str
    description: str | None = None
    tags: list[str] = field(default_factory=list)
    section_id: str | None = None
    created: int = 0               # unix seconds
    updated: int | None = None
    number_of_notes: int = 0
    number_of_annotations: int = 0
    number_of_versions: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Screen":
        section = data.get("section") or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description"),
            tags=list(data.get("tags") or []),
            section_id=section.get("id"),
            created=data.get("created", 0),
            updated=data.get("updated"),
            number_of_notes=data.get("number_of_notes", 0),
            number_of_annotations=data.get("number_of_annotations", 0),
            number_of_versions=data.get("number_of_versions", 0),
        )


@dataclass
class Link:
    """Hotspot linking an area of the screen to another screen."""
    rect: Rect
    destination_name: str
    destination_type: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        destination = data.get("destination") or {}
        return cls(
            rect=Rect.from_dict(data.get("rect") or {}),
            destination_name=destination.get("name", ""),
            destination_type=destination.get("type", ""),
        )


@dataclass
class ScreenVersion:
    """Latest version snapshot: layer tree, assets and links."""

    width: float
    height: float
    density_scale: float = 1
    background_color: Color | None = None
    layers: list[Layer] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScreenVersion":
        background = data.get("background_color")
        return cls(
            width=data.get("width", 0),
            height=data.get("height", 0),
            density_scale=data.get("density_scale", 1),
            background_color=Color.from_dict(background) if background else None,
            layers=[Layer.from_dict(layer) for layer in data.get("layers") or []],
            assets=[Asset.from_dict(asset) for asset in data.get("assets") or []],
            links=[Link.from_dict(link) for link in data.get("links") or []],
        )


@dataclass
class Annotation:
    """A screen annotation. Position is normalized to 0..1 of the screen size."""
    content: str
    type_name: str
    x: float
    y: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Annotation":
        position = data.get("position") or {}
        return cls(
            content=data.get("content", ""),
            type_name=(data.get("type") or {}).get("name", ""),
            x=position.get("x", 0),
            y=position.get("y", 0),
        )
