"""CSS-like formatting of style values, shared by the spec and layer printers."""

from ..models import Blur, Border, Color, Fill, Gradient, Padding, Shadow
from ..utils import round_half_up


def format_number(value: float) -> str:
    """Format a number without a trailing ".0" (10.0 -> "10", 1.5 -> "1.5")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def round2(value: float) -> float:
    """Round to 2 decimals."""
    return round_half_up(value * 100) / 100


def format_color(color: Color) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {format_number(color.a)})"


def format_css_color(color: Color) -> str:
    """Hex when opaque, rgba() otherwise."""
    if color.a == 1:
        return f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    return format_color(color)


def format_gradient(gradient: Gradient, color_fn=format_color) -> str:
    stops = ", ".join(
        f"{color_fn(stop.color)} {round_half_up(stop.position * 100)}%" for stop in gradient.color_stops
    )
    if gradient.type == "linear":
        angle = gradient.angle if gradient.angle is not None else 0
        return f"linear-gradient({format_number(angle)}deg, {stops})"
    if gradient.type == "radial":
        return f"radial-gradient({stops})"
    return f"angular-gradient({stops})"


def format_fill(fill: Fill, color_fn=format_color) -> str:
    if fill.type == "gradient" and fill.gradient:
        result = format_gradient(fill.gradient, color_fn)
    elif fill.color:
        result = color_fn(fill.color)
    else:
        result = fill.type

    if fill.blend_mode:
        result += f" ({fill.blend_mode})"
    return result


def format_border(border: Border, color_fn=format_color) -> str:
    position = border.position or "center"
    thickness = border.thickness if border.thickness is not None else 1
    fill = format_fill(border.fill, color_fn) if border.fill else "none"
    return f"{position} {format_number(thickness)}px {fill}"


def format_box_shadow(shadow: Shadow, color_fn=format_color) -> str:
    inset = "inset " if shadow.type == "inner" else ""
    color = color_fn(shadow.color) if shadow.color else "transparent"
    return (
        f"{inset}{_px(shadow.offset_x)} {_px(shadow.offset_y)} "
        f"{_px(shadow.blur_radius)} {_px(shadow.spread)} {color}"
    )


def format_drop_shadow(shadow: Shadow, color_fn=format_color) -> str:
    color = color_fn(shadow.color) if shadow.color else "transparent"
    return f"{_px(shadow.offset_x)} {_px(shadow.offset_y)} {_px(shadow.blur_radius)} {color}"


def format_blur_radius(blur: Blur) -> str:
    return _px(blur.radius)


def format_css_fill(fill: Fill) -> str:
    return format_fill(fill, format_css_color)


def format_css_border(border: Border) -> str:
    return format_border(border, format_css_color)


def format_css_box_shadow(shadow: Shadow) -> str:
    return format_box_shadow(shadow, format_css_color)


def format_padding_shorthand(padding: Padding) -> str:
    """CSS padding shorthand, or "" when there is no padding.

    Example: Padding(8, 16, 8, 16) -> "8px 16px"
    """
    top, right, bottom, left = padding.top, padding.right, padding.bottom, padding.left

    if top == right == bottom == left == 0:
        return ""
    if top == right == bottom == left:
        return f"{top}px"
    if top == bottom and left == right:
        return f"{top}px {right}px"
    if left == right:
        return f"{top}px {right}px {bottom}px"
    return f"{top}px {right}px {bottom}px {left}px"


def _px(value: float | None) -> str:
    return f"{format_number(value or 0)}px"
