"""Layer tree model - parsed from a screen version's `layers` payload."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Rect:
    """Bounding rectangle in screen pixel space (y grows downwards)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        """Point-in-rect test, edges inclusive."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rect":
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
        )


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        return cls(r=data.get("r", 0), g=data.get("g", 0), b=data.get("b", 0), a=data.get("a", 1))


@dataclass(frozen=True)
class ColorStop:
    color: Color
    position: float  # 0..1


@dataclass(frozen=True)
class Gradient:
    type: str = "linear"  # "linear", "radial" or "angular"
    angle: float | None = None
    color_stops: list[ColorStop] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Gradient":
        stops = [
            ColorStop(color=Color.from_dict(s.get("color") or {}), position=s.get("position", 0))
            for s in data.get("color_stops") or []
        ]
        return cls(type=data.get("type") or "linear", angle=data.get("angle"), color_stops=stops)


@dataclass(frozen=True)
class Fill:
    type: str                          # "color", "gradient", ...
    color: Color | None = None
    gradient: Gradient | None = None
    blend_mode: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fill":
        return cls(
            type=data.get("type", "color"),
            color=Color.from_dict(data["color"]) if data.get("color") else None,
            gradient=Gradient.from_dict(data["gradient"]) if data.get("gradient") else None,
            blend_mode=data.get("blend_mode"),
        )


@dataclass(frozen=True)
class Border:
    position: str | None = None        # "center", "inside", "outside"
    thickness: float | None = None
    fill: Fill | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Border":
        return cls(
            position=data.get("position"),
            thickness=data.get("thickness"),
            fill=Fill.from_dict(data["fill"]) if data.get("fill") else None,
        )


@dataclass(frozen=True)
class Shadow:
    type: str = "outer"                # "outer" or "inner"
    offset_x: float | None = None
    offset_y: float | None = None
    blur_radius: float | None = None
    spread: float | None = None
    color: Color | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shadow":
        return cls(
            type=data.get("type") or "outer",
            offset_x=data.get("offset_x"),
            offset_y=data.get("offset_y"),
            blur_radius=data.get("blur_radius"),
            spread=data.get("spread"),
            color=Color.from_dict(data["color"]) if data.get("color") else None,
        )


@dataclass(frozen=True)
class Blur:
    type: str | None = None            # "gaussian" or "background"
    radius: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Blur":
        return cls(type=data.get("type"), radius=data.get("radius"))


@dataclass(frozen=True)
class TextStyle:
    font_family: str = ""
    postscript_name: str = ""
    font_size: float = 0
    font_weight: int = 400
    line_height: float | None = None
    letter_spacing: float | None = None
    text_align: str | None = None
    color: Color | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextStyle":
        return cls(
            font_family=data.get("font_family", ""),
            postscript_name=data.get("postscript_name", ""),
            font_size=data.get("font_size", 0),
            font_weight=data.get("font_weight", 400),
            line_height=data.get("line_height"),
            letter_spacing=data.get("letter_spacing"),
            text_align=data.get("text_align"),
            color=Color.from_dict(data["color"]) if data.get("color") else None,
        )


@dataclass(frozen=True)
class TextStyleRun:
    """A styled range of a text layer's content."""
    style: TextStyle | None
    range: dict[str, int] | None = None  # {"location": ..., "length": ...}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextStyleRun":
        style = TextStyle.from_dict(data["style"]) if data.get("style") else None
        return cls(style=style, range=data.get("range"))


@dataclass(frozen=True)
class Layer:
    """A node of the screen's visual tree. Read-only snapshot, never mutated."""

    rect: Rect
    type: str = "shape"                # "text", "shape", "group"
    name: str | None = None
    opacity: float = 1
    blend_mode: str | None = None
    border_radius: float | None = None
    rotation: float | None = None
    fills: list[Fill] = field(default_factory=list)
    borders: list[Border] = field(default_factory=list)
    shadows: list[Shadow] = field(default_factory=list)
    blur: Blur | None = None
    text_styles: list[TextStyleRun] = field(default_factory=list)
    content: str | None = None
    component_name: str | None = None
    exportable: bool = False
    layers: list["Layer"] = field(default_factory=list)

    @property
    def is_text(self) -> bool:
        return self.type == "text"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Layer":
        return cls(
            rect=Rect.from_dict(data.get("rect") or {}),
            type=data.get("type", "shape"),
            name=data.get("name"),
            opacity=data.get("opacity", 1),
            blend_mode=data.get("blend_mode"),
            border_radius=data.get("border_radius"),
            rotation=data.get("rotation"),
            fills=[Fill.from_dict(f) for f in data.get("fills") or []],
            borders=[Border.from_dict(b) for b in data.get("borders") or []],
            shadows=[Shadow.from_dict(s) for s in data.get("shadows") or []],
            blur=Blur.from_dict(data["blur"]) if data.get("blur") else None,
            text_styles=[TextStyleRun.from_dict(t) for t in data.get("text_styles") or []],
            content=data.get("content"),
            component_name=data.get("component_name"),
            exportable=bool(data.get("exportable", False)),
            layers=[cls.from_dict(child) for child in data.get("layers") or []],
        )
