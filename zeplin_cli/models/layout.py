"""Layout inferred from child geometry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Padding:
    top: int
    right: int
    bottom: int
    left: int


@dataclass(frozen=True)
class LayoutInfo:
    """Best-guess flow layout of a parent layer. Recomputed on demand, never cached."""

    padding: Padding
    direction: str | None = None   # "row", "column" or None (indeterminate)
    gap: int | None = None         # set only when sibling gaps are uniform


@dataclass(frozen=True)
class SiblingGap:
    gap: int
    axis: str                      # "vertical" or "horizontal"
