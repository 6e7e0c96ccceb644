"""Rotating regular polygon demo.

Edge count and HSB color are adjustable; the polygon spins around the
frame center. The same polygon can be exported as a standalone SVG
document.
"""

from constants import (
    POLYGON_STROKE_WIDTH, SVG_VIEWBOX_SIZE, SVG_POLYGON_RADIUS,
    MIN_POLYGON_EDGES, MAX_POLYGON_EDGES,
)
from models.drawing import DrawingList
from models.shapes import PolygonShape
from models.transform import Vec2
from utils.geometry import regular_polygon_points, rotate_points
from .base_program import BaseProgram

SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg viewBox="0 0 {size:g} {size:g}" xmlns="http://www.w3.org/2000/svg">
    <g transform="rotate({rotation:g} {center:g} {center:g})">
        <path d="{path} Z" fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width:g}"/>
    </g>
</svg>
"""


class PolygonProgram(BaseProgram):
    """Regular polygon with adjustable edges and color."""

    title = "Polygon"

    def __init__(self, polygon=None):
        super().__init__()
        self.polygon = polygon if polygon is not None else PolygonShape()

    # ========================================
    # Controls
    # ========================================

    def set_edges(self, edges):
        """Clamp to the slider range; PolygonShape floors at 3 on its own."""
        self.polygon.edges = min(MAX_POLYGON_EDGES, max(MIN_POLYGON_EDGES, int(edges)))

    def set_hue(self, hue):
        self.polygon.hue = hue

    def set_saturation(self, saturation):
        self.polygon.saturation = saturation

    def set_brightness(self, brightness):
        self.polygon.brightness = brightness

    # ========================================
    # Output
    # ========================================

    def render(self, bounds, rotation_angle):
        drawing = DrawingList()
        drawing.add(self.background(bounds))

        center = bounds.center
        radius = bounds.min_extent * self.polygon.radius
        points = rotate_points(regular_polygon_points(self.polygon.edges, center, radius),
                               center, rotation_angle)

        drawing.fill_path(points, self.polygon.fill_color())
        drawing.stroke_path(points, POLYGON_STROKE_WIDTH, self.polygon.stroke_color(), closed=True)
        return list(drawing)

    def to_svg(self, rotation_angle=None):
        """SVG document of the polygon in a 300x300 viewBox.

        The rotation is left to an SVG transform rather than baked into the
        vertices.
        """
        if rotation_angle is None:
            rotation_angle = self.rotation_angle
        center = SVG_VIEWBOX_SIZE / 2.0
        points = regular_polygon_points(self.polygon.edges, Vec2(center, center), SVG_POLYGON_RADIUS)
        path = " ".join(
            f"{'M' if i == 0 else 'L'} {p.x:.1f} {p.y:.1f}" for i, p in enumerate(points)
        )
        return SVG_TEMPLATE.format(
            size=SVG_VIEWBOX_SIZE,
            center=center,
            rotation=rotation_angle,
            path=path,
            fill=self.polygon.fill_color().to_css(),
            stroke=self.polygon.stroke_color().to_css(),
            stroke_width=POLYGON_STROKE_WIDTH,
        )
