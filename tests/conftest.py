"""
Shared fixtures for Canvas Shape Demos tests.

Provides default shapes, render bounds and program instances.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


@pytest.fixture
def line_shape():
    """Default thick line: (0.1, 0.4) -> (0.9, 0.4), width 0.2"""
    from models.shapes import LineShape
    from models.transform import Vec2
    return LineShape(Vec2(0.1, 0.4), Vec2(0.9, 0.4), 0.2)


@pytest.fixture
def line_controller(line_shape):
    """Drag controller driving the default line"""
    from components.transform_widgets import DragController
    return DragController(line_shape, 'line')


@pytest.fixture
def rectangle_shape():
    """Default creator rectangle at (100, 50), 100 x 50"""
    from models.shapes import RectangleShape
    return RectangleShape(100.0, 50.0, 100.0, 50.0)


@pytest.fixture
def square_bounds():
    """200 x 200 render surface at the origin"""
    from models.transform import Bounds
    return Bounds.from_size(200, 200)


@pytest.fixture
def window_bounds():
    """800 x 600 render surface at the origin"""
    from models.transform import Bounds
    return Bounds.from_size(800, 600)


@pytest.fixture
def line_program():
    from components.programs import CircleAndLineProgram
    return CircleAndLineProgram()


@pytest.fixture
def canvas_program():
    from components.programs import CanvasProgram
    return CanvasProgram()


@pytest.fixture
def polygon_program():
    from components.programs import PolygonProgram
    return PolygonProgram()
