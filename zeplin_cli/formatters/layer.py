"""Verbose layer detail tree, asset and link listings."""

from ..models import Asset, Layer, Link, TextStyleRun
from .style import (
    format_blur_radius,
    format_border,
    format_box_shadow,
    format_color,
    format_drop_shadow,
    format_fill,
    format_number,
)

UNNAMED = "(unnamed)"


def format_layer_head(layer: Layer) -> str:
    """Head line: [type] name (component: X)."""
    component = f" (component: {layer.component_name})" if layer.component_name else ""
    return f"[{layer.type}] {layer.name or UNNAMED}{component}"


def format_text_styles(text_styles: list[TextStyleRun], indent: str) -> list[str]:
    lines = []
    for run in text_styles:
        style = run.style
        if not style:
            continue

        line_height = f"{format_number(style.line_height)}px" if style.line_height is not None else "-"
        letter_spacing = f"{format_number(style.letter_spacing)}px" if style.letter_spacing is not None else "-"

        lines.append(f"{indent}Text style:")
        lines.append(f"{indent}  Font: {style.font_family} ({style.postscript_name})")
        lines.append(
            f"{indent}  Size: {format_number(style.font_size)}px / Weight: {format_number(style.font_weight)}"
        )
        lines.append(f"{indent}  Line height: {line_height} / Letter spacing: {letter_spacing}")
        if style.text_align:
            lines.append(f"{indent}  Align: {style.text_align}")
        if style.color:
            lines.append(f"{indent}  Color: {format_color(style.color)}")
    return lines


def format_layer_detail(layer: Layer, indent: str) -> list[str]:
    """All visual properties of one layer, one per line."""
    rect = layer.rect
    lines = [
        f"{indent}Position: ({format_number(rect.x)}, {format_number(rect.y)}) "
        f"Size: {format_number(rect.width)} x {format_number(rect.height)}",
        f"{indent}opacity: {format_number(layer.opacity)}",
    ]

    if layer.blend_mode:
        lines.append(f"{indent}Blend mode: {layer.blend_mode}")
    if layer.border_radius is not None:
        lines.append(f"{indent}Corner radius: {format_number(layer.border_radius)}")
    if layer.rotation is not None:
        lines.append(f"{indent}Rotation: {format_number(layer.rotation)}°")

    for fill in layer.fills:
        lines.append(f"{indent}Fill: {format_fill(fill)}")
    for border in layer.borders:
        lines.append(f"{indent}Border: {format_border(border)}")
    for shadow in layer.shadows:
        lines.append(f"{indent}box-shadow: {format_box_shadow(shadow)}")
        if shadow.type != "inner":
            lines.append(f"{indent}drop-shadow: {format_drop_shadow(shadow)}")

    if layer.blur:
        if layer.blur.type == "background":
            lines.append(f"{indent}backdrop-blur: {format_blur_radius(layer.blur)}")
        else:
            lines.append(f"{indent}blur: {format_blur_radius(layer.blur)}")

    if layer.is_text and layer.content:
        lines.append(f'{indent}Content: "{layer.content}"')
    if layer.is_text and layer.text_styles:
        lines.extend(format_text_styles(layer.text_styles, indent))

    if layer.exportable:
        lines.append(f"{indent}Exportable")

    return lines


def format_layer_tree(layers: list[Layer], prefix: str = "") -> list[str]:
    """Draw layers and all descendants with box-drawing connectors.

    Walks with an explicit stack, so nesting depth is not bounded by recursion.
    """
    lines = []
    # Items are (layer, prefix, is_last), or a plain separator line string
    stack: list = _tree_items(layers, prefix)

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        layer, layer_prefix, is_last = item
        connector = "└─" if is_last else "├─"
        child_prefix = f"{layer_prefix}    " if is_last else f"{layer_prefix}│   "

        lines.append(f"{layer_prefix}{connector} {format_layer_head(layer)}")
        lines.extend(format_layer_detail(layer, f"{child_prefix} "))

        if layer.layers:
            if not is_last:
                stack.append(f"{layer_prefix}│")
            stack.extend(_tree_items(layer.layers, child_prefix))
    return lines


def _tree_items(layers: list[Layer], prefix: str) -> list:
    """Siblings as stack items, reversed so the first one pops first."""
    count = len(layers)
    return [(layer, prefix, i == count - 1) for i, layer in reversed(list(enumerate(layers)))]


def format_layer_subtree(layer: Layer) -> list[str]:
    """A single layer as the root of its own tree (used for clipboard copies)."""
    lines = [format_layer_head(layer)]
    lines.extend(format_layer_detail(layer, "  "))
    if layer.layers:
        lines.extend(format_layer_tree(layer.layers, "  "))
    return lines


def format_assets(assets: list[Asset]) -> list[str]:
    if not assets:
        return []

    lines = ["", "=== Assets ==="]
    for i, asset in enumerate(assets, start=1):
        layer_label = f" (layer: {asset.layer_name})" if asset.layer_name else ""
        lines.append(f"  [{i}] {asset.display_name}{layer_label}")
        descriptions = [
            f"{c.format} @{format_number(c.density)}x" if c.density is not None else c.format
            for c in asset.contents
        ]
        lines.append(f"      {', '.join(descriptions)}")
    return lines


def format_links(links: list[Link]) -> list[str]:
    if not links:
        return []

    lines = ["", "=== Links ==="]
    for i, link in enumerate(links, start=1):
        rect = link.rect
        lines.append(
            f"  [{i}] ({format_number(rect.x)}, {format_number(rect.y)}) "
            f"{format_number(rect.width)}x{format_number(rect.height)} "
            f'-> "{link.destination_name}" ({link.destination_type})'
        )
    return lines
