"""Layout inference - derive padding, flow direction and gap from child geometry.

Design files carry no flow metadata, only absolute rectangles. This module
guesses a flex-like layout for a parent from its direct children:

    padding   distance from the children's bounding box to the parent edges
    direction "column" when children stack vertically, "row" when they sit
              side by side, None when they overlap on both axes
    gap       the spacing between adjacent children, only when it is uniform

Everything here is a pure function of rectangles and never raises.
"""

from ..models import Layer, LayoutInfo, Padding, SiblingGap
from ..utils import round_half_up

# A gap below this counts as overlap. Small negative gaps come from rounding.
OVERLAP_TOLERANCE = -5
# Max absolute difference from the first gap for spacing to count as uniform.
GAP_TOLERANCE = 2

ROW = "row"
COLUMN = "column"


def infer_layout(parent: Layer) -> LayoutInfo | None:
    """Infer the layout of a parent's direct children.

    Returns None when the parent has no children.
    """
    children = parent.layers
    if not children:
        return None

    padding = _padding(parent, children)
    if len(children) == 1:
        return LayoutInfo(padding=padding)

    by_y = sort_children(children, COLUMN)
    by_x = sort_children(children, ROW)
    vertical_gaps = _adjacent_gaps(by_y, COLUMN)
    horizontal_gaps = _adjacent_gaps(by_x, ROW)

    vertical_overlap = any(g < OVERLAP_TOLERANCE for g in vertical_gaps)
    horizontal_overlap = any(g < OVERLAP_TOLERANCE for g in horizontal_gaps)

    if vertical_overlap and horizontal_overlap:
        return LayoutInfo(padding=padding)

    if not vertical_overlap and horizontal_overlap:
        direction = COLUMN
    elif not horizontal_overlap and vertical_overlap:
        direction = ROW
    else:
        vertical_span = by_y[-1].rect.bottom - by_y[0].rect.y
        horizontal_span = by_x[-1].rect.right - by_x[0].rect.x
        direction = COLUMN if vertical_span >= horizontal_span else ROW

    candidates = vertical_gaps if direction == COLUMN else horizontal_gaps
    return LayoutInfo(padding=padding, direction=direction, gap=_uniform_gap(candidates))


def sort_children(children: list[Layer], direction: str | None) -> list[Layer]:
    """Children in flow order: by top edge for columns, left edge for rows."""
    if direction == COLUMN:
        return sorted(children, key=lambda c: c.rect.y)
    if direction == ROW:
        return sorted(children, key=lambda c: c.rect.x)
    return list(children)


def sibling_gaps(children: list[Layer], direction: str) -> list[SiblingGap]:
    """Per-sibling gaps along the flow direction, in flow order."""
    axis = "vertical" if direction == COLUMN else "horizontal"
    ordered = sort_children(children, direction)
    return [SiblingGap(gap=gap, axis=axis) for gap in _adjacent_gaps(ordered, direction)]


def _padding(parent: Layer, children: list[Layer]) -> Padding:
    min_x = min(c.rect.x for c in children)
    min_y = min(c.rect.y for c in children)
    max_x = max(c.rect.right for c in children)
    max_y = max(c.rect.bottom for c in children)
    rect = parent.rect
    return Padding(
        top=max(0, round_half_up(min_y - rect.y)),
        right=max(0, round_half_up(rect.right - max_x)),
        bottom=max(0, round_half_up(rect.bottom - max_y)),
        left=max(0, round_half_up(min_x - rect.x)),
    )


def _adjacent_gaps(ordered: list[Layer], direction: str) -> list[int]:
    gaps = []
    for current, following in zip(ordered, ordered[1:]):
        if direction == COLUMN:
            gaps.append(round_half_up(following.rect.y - current.rect.bottom))
        else:
            gaps.append(round_half_up(following.rect.x - current.rect.right))
    return gaps


def _uniform_gap(gaps: list[int]) -> int | None:
    if not gaps or gaps[0] <= 0:
        return None
    first = gaps[0]
    if all(abs(g - first) <= GAP_TOLERANCE for g in gaps):
        return first
    return None
