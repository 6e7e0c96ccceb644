"""Transform data structures for coordinate and state representation."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Relative shape space (fraction of frame extent)
    - Absolute widget pixels
    - Scene space behind a pan/zoom view

    The space is never tagged - callers track which space a value lives in.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        return Vec2(self.x * factor, self.y * factor)

    def __truediv__(self, factor):
        return Vec2(self.x / factor, self.y / factor)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def copy(self):
        return Vec2(self.x, self.y)


@dataclass
class Bounds:
    """Render surface rectangle in absolute pixels.

    x, y is the top-left corner in the parent's coordinates; local
    coordinates inside the bounds start at (0, 0).
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, width, height):
        return cls(0.0, 0.0, float(width), float(height))

    @property
    def center(self) -> Vec2:
        """Center in local coordinates."""
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def min_extent(self) -> float:
        return min(self.width, self.height)

    def contains(self, point: Vec2) -> bool:
        """Inclusive containment test for a point in parent coordinates."""
        return (self.x <= point.x <= self.x + self.width
                and self.y <= point.y <= self.y + self.height)


@dataclass
class ViewTransform:
    """Pan/zoom state of a scene.

    Maps scene space to screen space as ``screen = scene * scale + translation``.
    drag_start is only set while a pan gesture is active.
    """
    translation: Vec2
    scale: float = 1.0
    drag_start: Optional[Vec2] = None

    @classmethod
    def identity(cls):
        return cls(Vec2(0.0, 0.0), 1.0, None)
