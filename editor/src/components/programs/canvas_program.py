"""Creator canvas: a pannable, zoomable scene with a draggable rectangle.

The scene is conceptually unbounded. Scene (0, 0) sits at the top-left of
the view until the user pans; positive X is right, positive Y is down.
The rectangle is stored in scene pixels and drawn through the view
transform.

Events go to the rectangle first; only if it declines do they reach the
pan/zoom handler. The first handler that consumes an event wins.
"""

from constants import RECTANGLE_FILL_COLOR
from models.color import Color
from models.drawing import DrawingList
from models.events import EventKind, CursorMoved
from models.shapes import RectangleShape
from utils.coordinate_transforms import (
    cursor_position_in, local_position, scene_to_screen, screen_to_scene,
)
from components.canvas_widgets.pan_zoom import PanZoomState
from components.transform_widgets import DragController
from .base_program import BaseProgram


class CanvasProgram(BaseProgram):
    """Whiteboard scene with one rectangle."""

    title = "Creator Canvas"

    def __init__(self, rectangle=None, pan_zoom=None):
        super().__init__()
        self.rectangle = rectangle if rectangle is not None else RectangleShape()
        self.pan_zoom = pan_zoom if pan_zoom is not None else PanZoomState()
        self.drag = DragController(self.rectangle, 'rectangle')

    def on_event(self, event, bounds, cursor):
        local = cursor_position_in(bounds, cursor)
        if local is None:
            return self._on_event_outside(event, bounds, cursor), None

        message = CursorMoved(local) if event.kind is EventKind.CURSOR_MOVED else None

        # Step 1: shapes
        scene_point = screen_to_scene(local, self.pan_zoom.view)
        if self.drag.handle_event(event, scene_point):
            return True, message

        # Step 2: pan/zoom fallback
        return self.pan_zoom.handle_event(event, local), message

    def _on_event_outside(self, event, bounds, cursor):
        """An active drag or pan keeps following the cursor and ends on release.

        Presses and wheel events outside the surface are ignored.
        """
        if event.kind is EventKind.BUTTON_RELEASED:
            if event.is_primary_release() and self.drag.release():
                return True
            return self.pan_zoom.is_panning and self.pan_zoom.release()

        if event.kind is not EventKind.CURSOR_MOVED:
            return False
        local = local_position(bounds, cursor)
        if local is None:
            return False
        if self.drag.is_dragging:
            return self.drag.move(screen_to_scene(local, self.pan_zoom.view))
        return self.pan_zoom.move(local)

    def cursor_shape(self, bounds, cursor):
        local = cursor_position_in(bounds, cursor)
        if local is None:
            return None
        if self.drag.is_dragging:
            return self.drag.context.handle.get_cursor()
        handle = self.drag.handle_at(screen_to_scene(local, self.pan_zoom.view))
        return handle.get_cursor() if handle is not None else None

    def render(self, bounds, rotation_angle):
        drawing = DrawingList()
        view = self.pan_zoom.view
        top_left = scene_to_screen(self.rectangle.top_left, view)
        drawing.fill_rectangle(top_left, self.rectangle.width * view.scale,
                               self.rectangle.height * view.scale,
                               Color.from_rgb(RECTANGLE_FILL_COLOR))
        return list(drawing)
