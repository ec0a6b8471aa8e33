"""Axis-aligned geometry shared by every entity in the field."""

from dataclasses import dataclass
from typing import Protocol


class Box(Protocol):
    """Anything with a position and a size."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle (top-left origin, y grows downward)."""

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

    @classmethod
    def of(cls, box: Box) -> "Rect":
        """Freeze the current extents of a mutable entity."""
        return cls(box.x, box.y, box.width, box.height)


def overlaps(a: Box, b: Box) -> bool:
    """Check whether two rectangles intersect.

    All four comparisons are strict, so rectangles that only share an
    edge do not overlap.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
