"""Circle and rotating line demo.

A circle in the middle of the frame and a thick line across it. The line
rotates around the frame center; the circle does not. The line can be
dragged by its body or resized by its four corners while it rotates, so
every cursor position is first rotated back into the line's unrotated
relative space.

Also drawn, for debugging: the line in its unrotated position, and a red
dot where the user last clicked (in unrotated space).
"""

import logging

from constants import (
    LINE_ROTATION_STEP, CIRCLE_COLOR, DEBUG_LINE_COLOR,
    CLICK_MARKER_COLOR, CLICK_MARKER_RADIUS,
)
from models.color import Color
from models.drawing import DrawingList
from models.events import EventKind
from models.shapes import CircleShape, LineShape
from models.transform import Vec2
from utils.coordinate_transforms import (
    cursor_position_in, local_position, rel_to_abs_point, screen_to_shape_space,
)
from utils.geometry import rotate_line
from components.transform_widgets import DragController
from .base_program import BaseProgram

logger = logging.getLogger(__name__)


class CircleAndLineProgram(BaseProgram):
    """Draggable, resizable thick line over a circle."""

    title = "Circle and Line"
    rotation_step = LINE_ROTATION_STEP

    def __init__(self, line=None, circle=None):
        super().__init__()
        self.circle = circle if circle is not None else CircleShape()
        self.line = line if line is not None else LineShape()
        self.click_pos = Vec2(0.0, 0.0)  # Last click, relative unrotated space
        self.drag = DragController(self.line, 'line')

    def to_shape_space(self, bounds, cursor):
        """Cursor (parent coordinates) to the line's relative space, or None."""
        local = cursor_position_in(bounds, cursor)
        if local is None:
            return None
        return screen_to_shape_space(local, bounds, self.rotation_angle)

    def on_event(self, event, bounds, cursor):
        point = self.to_shape_space(bounds, cursor)
        if point is None:
            return self._on_event_outside(event, bounds, cursor), None

        if event.is_primary_press():
            self.click_pos = point
            logger.debug("Canvas clicked at (%.3f, %.3f) in line space", point.x, point.y)

        if event.kind is EventKind.WHEEL_SCROLLED:
            return False, None
        return self.drag.handle_event(event, point), None

    def _on_event_outside(self, event, bounds, cursor):
        """A drag that left the frame keeps following the cursor and ends on release.

        Presses outside the frame never start anything.
        """
        if event.is_primary_release():
            return self.drag.release()
        if event.kind is EventKind.CURSOR_MOVED and self.drag.is_dragging:
            local = local_position(bounds, cursor)
            if local is None:
                return False
            return self.drag.move(screen_to_shape_space(local, bounds, self.rotation_angle))
        return False

    def cursor_shape(self, bounds, cursor):
        point = self.to_shape_space(bounds, cursor)
        if point is None:
            return None
        handle = self.drag.context.handle if self.drag.is_dragging else self.drag.handle_at(point)
        return handle.get_cursor() if handle is not None else None

    def render(self, bounds, rotation_angle):
        drawing = DrawingList()
        drawing.add(self.background(bounds))

        center = bounds.center
        frame_min = bounds.min_extent

        drawing.fill_circle(center, frame_min * self.circle.radius, Color.from_rgb(CIRCLE_COLOR))

        start = rel_to_abs_point(self.line.start, bounds.width, bounds.height)
        end = rel_to_abs_point(self.line.end, bounds.width, bounds.height)
        stroke_width = frame_min * self.line.width

        rotated_start, rotated_end = rotate_line(start, end, center, rotation_angle)
        drawing.stroke_line(rotated_start, rotated_end, stroke_width, self.rainbow_gradient(bounds))

        # Unrotated copy
        drawing.stroke_line(start, end, stroke_width, Color.from_rgb(DEBUG_LINE_COLOR))

        for handle in self.drag.mode.get_handles().values():
            drawing.extend(handle.draw(self.line, bounds, rotation_angle))

        drawing.fill_circle(rel_to_abs_point(self.click_pos, bounds.width, bounds.height),
                            CLICK_MARKER_RADIUS, Color.from_rgb(CLICK_MARKER_COLOR))

        return list(drawing)
