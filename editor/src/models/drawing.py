"""Render instructions.

Programs describe a frame as a flat list of fill/stroke primitives in
absolute pixel coordinates. The Qt canvas widget replays them with a
QPainter; tests compare them directly.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from models.color import Color
from models.transform import Vec2


@dataclass(frozen=True)
class LinearGradient:
    """Linear gradient between two absolute points.

    stops: (offset 0-1, Color) pairs in ascending offset order.
    """
    start: Vec2
    end: Vec2
    stops: Tuple[Tuple[float, Color], ...] = ()

    @classmethod
    def from_stops(cls, start, end, stops):
        """Build from (offset, (r, g, b)) pairs as stored in constants."""
        return cls(start, end, tuple((offset, Color.from_rgb(rgb)) for offset, rgb in stops))


Style = Union[Color, LinearGradient]


@dataclass(frozen=True)
class FillRectangle:
    top_left: Vec2
    width: float
    height: float
    style: Style


@dataclass(frozen=True)
class FillCircle:
    center: Vec2
    radius: float
    style: Style


@dataclass(frozen=True)
class FillPath:
    """Closed polygon fill."""
    points: Tuple[Vec2, ...]
    style: Style


@dataclass(frozen=True)
class StrokeLine:
    start: Vec2
    end: Vec2
    width: float
    style: Style


@dataclass(frozen=True)
class StrokePath:
    points: Tuple[Vec2, ...]
    width: float
    style: Style
    closed: bool = True


Primitive = Union[FillRectangle, FillCircle, FillPath, StrokeLine, StrokePath]


@dataclass
class DrawingList:
    """Ordered list of primitives, painted back to front."""
    primitives: List[Primitive] = field(default_factory=list)

    def add(self, primitive):
        self.primitives.append(primitive)

    def fill_rectangle(self, top_left, width, height, style):
        self.primitives.append(FillRectangle(top_left, width, height, style))

    def fill_circle(self, center, radius, style):
        self.primitives.append(FillCircle(center, radius, style))

    def fill_path(self, points, style):
        self.primitives.append(FillPath(tuple(points), style))

    def stroke_line(self, start, end, width, style):
        self.primitives.append(StrokeLine(start, end, width, style))

    def stroke_path(self, points, width, style, closed=True):
        self.primitives.append(StrokePath(tuple(points), width, style, closed))

    def extend(self, primitives):
        self.primitives.extend(primitives)

    def __iter__(self):
        return iter(self.primitives)

    def __len__(self):
        return len(self.primitives)
