"""Shape data for the demos.

Shapes are plain mutable data. Interaction (drag) and rendering live
elsewhere; these classes only know their geometry.
"""
from dataclasses import dataclass, field

from constants import (
    DEFAULT_LINE_START, DEFAULT_LINE_END, DEFAULT_LINE_WIDTH,
    DEFAULT_CIRCLE_RADIUS, DEFAULT_RECT_X, DEFAULT_RECT_Y,
    DEFAULT_RECT_WIDTH, DEFAULT_RECT_HEIGHT,
    DEFAULT_POLYGON_EDGES, MIN_POLYGON_EDGES, DEFAULT_POLYGON_RADIUS,
    DEFAULT_HUE, DEFAULT_SATURATION, DEFAULT_BRIGHTNESS,
    POLYGON_FILL_ALPHA, POLYGON_STROKE_DARKEN,
)
from models.color import Color
from models.transform import Vec2


@dataclass
class LineShape:
    """Thick line segment in relative units.

    start/end are fractions of the frame extent, width is a fraction of
    min(frame.width, frame.height). Only horizontal segments
    (start.y == end.y) hit-test correctly. Corner indices:
    0=upper-left, 1=upper-right, 2=lower-right, 3=lower-left.
    """
    start: Vec2 = field(default_factory=lambda: Vec2(*DEFAULT_LINE_START))
    end: Vec2 = field(default_factory=lambda: Vec2(*DEFAULT_LINE_END))
    width: float = DEFAULT_LINE_WIDTH

    def translate(self, delta: Vec2):
        """Move both endpoints by delta."""
        self.start = self.start + delta
        self.end = self.end + delta


@dataclass
class RectangleShape:
    """Axis-aligned rectangle in absolute (scene) pixels."""
    x: float = DEFAULT_RECT_X
    y: float = DEFAULT_RECT_Y
    width: float = DEFAULT_RECT_WIDTH
    height: float = DEFAULT_RECT_HEIGHT

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.x, self.y)

    def contains(self, point: Vec2) -> bool:
        return (self.x <= point.x <= self.x + self.width
                and self.y <= point.y <= self.y + self.height)

    def move_to(self, top_left: Vec2):
        self.x = top_left.x
        self.y = top_left.y


@dataclass
class CircleShape:
    """Circle centered in the frame; radius relative to the frame's min extent."""
    radius: float = DEFAULT_CIRCLE_RADIUS


class PolygonShape:
    """Regular polygon colored in HSB.

    The edge count is floored at 3 whenever it is set. radius is relative
    to min(frame.width, frame.height).
    """

    def __init__(self, edges=DEFAULT_POLYGON_EDGES, radius=DEFAULT_POLYGON_RADIUS,
                 hue=DEFAULT_HUE, saturation=DEFAULT_SATURATION, brightness=DEFAULT_BRIGHTNESS):
        self._edges = max(MIN_POLYGON_EDGES, int(edges))
        self.radius = radius
        self.hue = hue
        self.saturation = saturation
        self.brightness = brightness

    @property
    def edges(self) -> int:
        return self._edges

    @edges.setter
    def edges(self, value):
        self._edges = max(MIN_POLYGON_EDGES, int(value))

    def fill_color(self) -> Color:
        """Translucent fill color."""
        return Color.from_hsb(self.hue, self.saturation, self.brightness, POLYGON_FILL_ALPHA)

    def stroke_color(self) -> Color:
        """Opaque stroke, darker than the fill."""
        return Color.from_hsb(self.hue, self.saturation, self.brightness * POLYGON_STROKE_DARKEN)

    def __repr__(self):
        return (f"PolygonShape(edges={self._edges}, radius={self.radius}, "
                f"hue={self.hue}, saturation={self.saturation}, brightness={self.brightness})")
