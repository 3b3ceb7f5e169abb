"""Compact structural spec - one line per layer with style and inferred layout."""

from ..models import Layer, Screen, ScreenVersion
from ..services.layout import infer_layout, sibling_gaps, sort_children
from ..utils import round_half_up
from .style import (
    format_css_border,
    format_css_box_shadow,
    format_css_color,
    format_css_fill,
    format_number,
    format_padding_shorthand,
    round2,
)

MAX_TEXT_LENGTH = 100
UNNAMED = "(unnamed)"
GAP_SYMBOLS = {"vertical": "↕", "horizontal": "↔"}


def format_compact_props(layer: Layer) -> str:
    """Visual props joined by " | " (empty string when the layer has none)."""
    parts = []

    if layer.fills:
        parts.append(f"bg: {', '.join(format_css_fill(f) for f in layer.fills)}")

    if layer.border_radius is not None and layer.border_radius > 0:
        parts.append(f"rounded: {format_number(round2(layer.border_radius))}px")

    if layer.borders:
        parts.append(f"border: {', '.join(format_css_border(b) for b in layer.borders)}")

    if layer.shadows:
        parts.append(f"shadow: {', '.join(format_css_box_shadow(s) for s in layer.shadows)}")

    if layer.opacity != 1:
        parts.append(f"opacity: {format_number(round2(layer.opacity))}")

    if layer.blur:
        radius = format_number(round2(layer.blur.radius or 0))
        if layer.blur.type == "background":
            parts.append(f"backdrop-blur: {radius}px")
        else:
            parts.append(f"blur: {radius}px")

    return " | ".join(parts)


def format_compact_text(layer: Layer) -> str:
    """Typography of a text layer's first style run."""
    if not layer.is_text or not layer.text_styles:
        return ""

    style = layer.text_styles[0].style
    if not style:
        return ""

    line_height = f"/{format_number(style.line_height)}px" if style.line_height is not None else ""
    parts = [
        f"font: {style.font_family} {format_number(style.font_weight)} "
        f"{format_number(style.font_size)}px{line_height}"
    ]

    if style.color:
        parts.append(f"color: {format_css_color(style.color)}")
    if style.letter_spacing is not None and style.letter_spacing != 0:
        parts.append(f"ls: {format_number(style.letter_spacing)}px")
    if style.text_align:
        parts.append(f"align: {style.text_align}")

    return " | ".join(parts)


def format_text_content(content: str) -> str:
    escaped = content.replace("\n", "\\n")
    if len(escaped) > MAX_TEXT_LENGTH:
        return f'"{escaped[:MAX_TEXT_LENGTH - 3]}..."'
    return f'"{escaped}"'


def render_layer(
    layer: Layer,
    max_depth: int,
    depth: int = 0,
    prefix: str = "",
    is_last: bool = True,
) -> list[str]:
    """Render a layer and its descendants (down to max_depth) as spec lines."""
    lines = []
    connector = "└" if is_last else "├"
    child_prefix = f"{prefix}  " if is_last else f"{prefix}│ "

    size = f"{round_half_up(layer.rect.width)}×{round_half_up(layer.rect.height)}"
    type_suffix = f" text {size}" if layer.is_text else f" {size}"
    header_parts = [f"[{layer.name or UNNAMED}]{type_suffix}"]

    compact_props = format_compact_props(layer)
    if compact_props:
        header_parts.append(compact_props)

    layout = infer_layout(layer)
    if layout:
        padding = layout.padding
        # Children overflowing the parent make padding meaningless
        if (
            padding.left + padding.right <= layer.rect.width
            and padding.top + padding.bottom <= layer.rect.height
        ):
            shorthand = format_padding_shorthand(padding)
            if shorthand:
                header_parts.append(f"pad: {shorthand}")
        if layout.direction:
            header_parts.append("col" if layout.direction == "column" else "row")
        if layout.gap:
            header_parts.append(f"gap: {layout.gap}px")

    lines.append(f"{prefix}{connector} {' | '.join(header_parts)}")

    if layer.is_text:
        text_info = format_compact_text(layer)
        if text_info:
            lines.append(f"{child_prefix}  {text_info}")
        if layer.content:
            lines.append(f"{child_prefix}  text: {format_text_content(layer.content)}")

    children = layer.layers
    if not children:
        return lines

    if depth >= max_depth:
        lines.append(f"{child_prefix}  [...{len(children)} children]")
        return lines

    direction = layout.direction if layout else None
    ordered = sort_children(children, direction)
    gaps = sibling_gaps(children, direction) if direction and not layout.gap else None

    for i, child in enumerate(ordered):
        child_is_last = i == len(ordered) - 1
        lines.extend(render_layer(child, max_depth, depth + 1, child_prefix, child_is_last))

        if not child_is_last and gaps and gaps[i].gap != 0:
            gap_prefix = f"{child_prefix}│ "
            lines.append(gap_prefix)
            lines.append(f"{gap_prefix}{GAP_SYMBOLS[gaps[i].axis]} {gaps[i].gap}px")
            lines.append(gap_prefix)

    return lines


def render_spec(layers: list[Layer], max_depth: int) -> list[str]:
    """Render top-level layers, separated by blank lines."""
    lines = []
    for i, layer in enumerate(layers):
        is_last = i == len(layers) - 1
        lines.extend(render_layer(layer, max_depth, 0, "", is_last))
        if not is_last:
            lines.append("")
    return lines


def render_header(screen: Screen, version: ScreenVersion) -> list[str]:
    background = format_css_color(version.background_color) if version.background_color else "none"
    return [
        f"Screen: {screen.name} ({format_number(version.width)}×{format_number(version.height)}, "
        f"@{format_number(version.density_scale)}x)",
        f"Background: {background}",
        "=" * 64,
        "",
    ]


def filter_by_section(layers: list[Layer], section_name: str) -> list[Layer]:
    """Top-level layers whose name contains section_name, else matching depth-1 children."""
    needle = section_name.lower()
    matched = [layer for layer in layers if needle in (layer.name or "").lower()]
    if matched:
        return matched

    return [
        child
        for layer in layers
        for child in layer.layers
        if needle in (child.name or "").lower()
    ]
