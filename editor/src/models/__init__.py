"""
Canvas Shape Demos - Data Models

Plain data for shapes, colors, view transforms, events and render
instructions. Nothing in this package imports Qt.
"""

from .transform import Vec2, Bounds, ViewTransform
from .shapes import LineShape, RectangleShape, CircleShape, PolygonShape

__all__ = [
    'Vec2', 'Bounds', 'ViewTransform',
    'LineShape', 'RectangleShape', 'CircleShape', 'PolygonShape',
]
