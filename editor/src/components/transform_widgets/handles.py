"""Shape handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to test if a point hits it (in the shape's own coordinate space)
- How to apply a drag delta to the shape
- How to draw itself as render primitives
- Which cursor to show while hovering it
"""

from abc import ABC, abstractmethod
from PyQt5.QtCore import Qt

from constants import MIN_LINE_WIDTH, HANDLE_RADIUS, HANDLE_COLOR
from models.color import Color
from models.drawing import FillCircle
from models.transform import Vec2
from utils.coordinate_transforms import shape_space_to_screen
from utils.geometry import is_point_on_horizontal_line, is_point_on_line_corner, line_corners
from .drag_context import DragMode


class Handle(ABC):
    """Abstract base class for shape handles."""

    operation = DragMode.IDLE
    corner_index = None

    @abstractmethod
    def hit_test(self, point, shape) -> bool:
        """Test if point hits this handle.

        Args:
            point: Vec2 in the shape's coordinate space
            shape: Shape the handle belongs to

        Returns:
            bool: True if point hits this handle
        """
        pass

    @abstractmethod
    def drag(self, shape, delta):
        """Apply a drag step to shape in place.

        Args:
            shape: Shape to update
            delta: Vec2 cursor movement since the previous step, shape space

        Returns:
            Vec2: The part of delta actually applied (less than delta when
            a limit was hit)
        """
        pass

    @abstractmethod
    def get_cursor(self):
        """Get the Qt cursor shape for this handle.

        Returns:
            Qt.CursorShape: Cursor to display when hovering over this handle
        """
        pass

    def draw(self, shape, bounds, rotation):
        """Render primitives for this handle (absolute pixels). None by default."""
        return []


class LineCornerHandle(Handle):
    """Corner of a thick horizontal line.

    Dragging a corner moves the adjacent endpoint by the full horizontal
    delta and half the vertical delta, snaps the other endpoint's y to it,
    and changes the width by the full vertical delta: shrinking for upper
    corners (0, 1) moved down, growing for lower corners (2, 3).
    """

    operation = DragMode.CORNER

    # corner index -> (moves start endpoint, is upper corner)
    _LAYOUT = {
        0: (True, True),    # upper-left
        1: (False, True),   # upper-right
        2: (False, False),  # lower-right
        3: (True, False),   # lower-left
    }

    def __init__(self, corner_index):
        if corner_index not in self._LAYOUT:
            raise ValueError(f"Invalid corner index: {corner_index}")
        self.corner_index = corner_index
        self.moves_start, self.is_upper = self._LAYOUT[corner_index]

    def position(self, shape):
        return line_corners(shape.start, shape.end, shape.width)[self.corner_index]

    def hit_test(self, point, shape):
        # The first matching corner wins where corners overlap
        return is_point_on_line_corner(point, shape.start, shape.end, shape.width) == self.corner_index

    def drag(self, shape, delta):
        dy = delta.y
        # Never let the width go below MIN_LINE_WIDTH; the endpoint only
        # follows the part of the vertical delta that was applied.
        if self.is_upper:
            dy = min(dy, shape.width - MIN_LINE_WIDTH)
            shape.width -= dy
        else:
            dy = max(dy, MIN_LINE_WIDTH - shape.width)
            shape.width += dy

        if self.moves_start:
            shape.start = Vec2(shape.start.x + delta.x, shape.start.y + dy / 2.0)
            shape.end = Vec2(shape.end.x, shape.start.y)
        else:
            shape.end = Vec2(shape.end.x + delta.x, shape.end.y + dy / 2.0)
            shape.start = Vec2(shape.start.x, shape.end.y)
        return Vec2(delta.x, dy)

    def get_cursor(self):
        if self.corner_index in (0, 2):
            return Qt.SizeFDiagCursor
        return Qt.SizeBDiagCursor

    def draw(self, shape, bounds, rotation):
        center = shape_space_to_screen(self.position(shape), bounds, rotation)
        return [FillCircle(center, HANDLE_RADIUS, Color.from_rgb(HANDLE_COLOR))]


class LineBodyHandle(Handle):
    """The stroke of a thick line; hit within half the width of the segment."""

    operation = DragMode.BODY

    def hit_test(self, point, shape):
        return is_point_on_horizontal_line(point, shape.start, shape.end, shape.width / 2.0)

    def drag(self, shape, delta):
        shape.translate(delta)
        return delta

    def get_cursor(self):
        return Qt.SizeAllCursor


class RectangleBodyHandle(Handle):
    """Interior of an axis-aligned rectangle (scene pixels)."""

    operation = DragMode.BODY

    def hit_test(self, point, shape):
        return shape.contains(point)

    def drag(self, shape, delta):
        shape.move_to(Vec2(shape.x + delta.x, shape.y + delta.y))
        return delta

    def get_cursor(self):
        return Qt.OpenHandCursor
