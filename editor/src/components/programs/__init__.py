"""
Canvas Shape Demos - Canvas Programs

One program per demo. Each exposes on_event()/render() and holds its own
interaction state.
"""

from constants import DEMO_LINE, DEMO_RECTANGLE, DEMO_CREATOR, DEMO_POLYGON
from .base_program import BaseProgram
from .circle_and_line_program import CircleAndLineProgram
from .circle_and_rectangle_program import CircleAndRectangleProgram
from .canvas_program import CanvasProgram
from .polygon_program import PolygonProgram

# Program registry
PROGRAMS = {
    DEMO_LINE: CircleAndLineProgram,
    DEMO_RECTANGLE: CircleAndRectangleProgram,
    DEMO_CREATOR: CanvasProgram,
    DEMO_POLYGON: PolygonProgram,
}


def create_program(demo_name):
    """Factory function to create a program for a demo name.

    Raises:
        ValueError: If demo_name is unknown
    """
    program_class = PROGRAMS.get(demo_name)
    if program_class is None:
        raise ValueError(f"Unknown demo: {demo_name}")
    return program_class()


__all__ = [
    'BaseProgram', 'CircleAndLineProgram', 'CircleAndRectangleProgram',
    'CanvasProgram', 'PolygonProgram', 'PROGRAMS', 'create_program',
]
