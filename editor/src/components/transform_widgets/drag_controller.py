"""Per-shape drag state machine.

States: idle, dragging the body, dragging corner i. The controller only
sees points already mapped into the shape's coordinate space; mapping
from screen pixels is the owning program's job.
"""

import logging

from models.events import EventKind
from .drag_context import DragContext, DragMode
from .modes import create_mode

logger = logging.getLogger(__name__)


class DragController:
    """Drives one shape from press/move/release events.

    Every handler returns True when the event was consumed, so the caller
    can pass unconsumed events on to the next handler (pan/zoom).
    """

    def __init__(self, shape, mode_name):
        self.shape = shape
        self.mode = create_mode(mode_name)
        self.context = DragContext.idle()

    @property
    def drag_mode(self) -> DragMode:
        return self.context.operation

    @property
    def dragged_corner(self):
        return self.context.corner

    @property
    def is_dragging(self) -> bool:
        return self.context.is_dragging

    def handle_at(self, point):
        """Handle under point (shape space), for hover cursors."""
        return self.mode.get_handle_at_pos(point, self.shape)

    def press(self, point) -> bool:
        """Primary button pressed at point. Grabs a handle if one is hit.

        Only the anchor is recorded; the shape itself is not changed.
        """
        handle = self.mode.get_handle_at_pos(point, self.shape)
        if handle is None:
            logger.debug("Press at (%.3f, %.3f) missed the shape", point.x, point.y)
            return False
        self.context = DragContext.grab(handle, point)
        logger.debug("Drag started: %s corner=%s at (%.3f, %.3f)",
                     handle.operation.value, handle.corner_index, point.x, point.y)
        return True

    def release(self) -> bool:
        """Primary button released. Always ends the drag.

        Returns True only if a drag was active.
        """
        was_dragging = self.context.is_dragging
        if was_dragging:
            logger.debug("Drag ended: %s", self.context.operation.value)
        self.context = DragContext.idle()
        return was_dragging

    def move(self, point) -> bool:
        """Cursor moved to point. Applies the delta since the anchor while dragging.

        The anchor only advances by what the handle applied, so a clamped
        handle stays put until the cursor comes back past the limit.
        """
        if not self.context.is_dragging:
            return False
        delta = point - self.context.anchor
        applied = self.context.handle.drag(self.shape, delta)
        self.context.anchor = self.context.anchor + applied
        return True

    def handle_event(self, event, point) -> bool:
        """Dispatch a canvas event with its shape-space cursor position."""
        if event.is_primary_press():
            return self.press(point)
        if event.is_primary_release():
            return self.release()
        if event.kind is EventKind.CURSOR_MOVED:
            return self.move(point)
        return False
