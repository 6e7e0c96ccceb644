"""Pan/zoom state machine for a whole scene.

States: idle and panning. Translation and scale persist across frames and
map scene space to screen space (screen = scene * scale + translation).
This handler is the fallback after shapes decline an event.
"""

import logging

from constants import ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR, MIN_ZOOM, MAX_ZOOM
from models.events import EventKind
from models.transform import Vec2, ViewTransform

logger = logging.getLogger(__name__)


class PanZoomState:
    """Tracks a pan drag gesture and the wheel zoom of a scene view."""

    def __init__(self, view=None):
        self.view = view if view is not None else ViewTransform.identity()

    @property
    def translation(self) -> Vec2:
        return self.view.translation

    @property
    def scale(self) -> float:
        return self.view.scale

    @property
    def is_panning(self) -> bool:
        return self.view.drag_start is not None

    def reset(self):
        """Back to the identity view."""
        self.view = ViewTransform.identity()

    # ========================================
    # Pan
    # ========================================

    def press(self, cursor) -> bool:
        """Start panning at cursor (screen pixels). Always consumed."""
        self.view.drag_start = cursor.copy()
        return True

    def move(self, cursor) -> bool:
        """Translate by the movement since the last anchor while panning."""
        if self.view.drag_start is None:
            return False
        delta = cursor - self.view.drag_start
        self.view.translation = self.view.translation + delta
        self.view.drag_start = cursor.copy()
        return True

    def release(self) -> bool:
        """Stop panning. Always consumed."""
        self.view.drag_start = None
        return True

    # ========================================
    # Zoom
    # ========================================

    def zoom_by(self, factor, cursor) -> bool:
        """Scale the view by factor, keeping the point under cursor fixed.

        The new scale is clamped to [MIN_ZOOM, MAX_ZOOM]. Returns True only
        if the scale actually changed.
        """
        old_scale = self.view.scale
        new_scale = max(MIN_ZOOM, min(MAX_ZOOM, old_scale * factor))
        if new_scale == old_scale:
            return False

        zoom_factor = new_scale / old_scale
        self.view.translation = cursor + (self.view.translation - cursor) * zoom_factor
        self.view.scale = new_scale
        logger.debug("Zoom %.3f -> %.3f around (%.1f, %.1f)", old_scale, new_scale, cursor.x, cursor.y)
        return True

    def wheel(self, cursor, delta) -> bool:
        """Zoom in for a forward scroll, out for a backward one."""
        if delta > 0:
            return self.zoom_by(ZOOM_IN_FACTOR, cursor)
        if delta < 0:
            return self.zoom_by(ZOOM_OUT_FACTOR, cursor)
        return False

    def handle_event(self, event, cursor) -> bool:
        """Dispatch a canvas event with its cursor position in screen pixels."""
        if event.kind is EventKind.BUTTON_PRESSED:
            return self.press(cursor)
        if event.kind is EventKind.BUTTON_RELEASED:
            return self.release()
        if event.kind is EventKind.CURSOR_MOVED:
            return self.move(cursor)
        if event.kind is EventKind.WHEEL_SCROLLED:
            return self.wheel(cursor, event.wheel_delta)
        return False
