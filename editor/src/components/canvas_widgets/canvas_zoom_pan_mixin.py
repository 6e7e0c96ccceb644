"""Mixin for zoom and pan shortcuts on the canvas widget.

Mouse pan and wheel zoom go through the program's event handling; this
mixin adds the keyboard/menu side:
- Zoom in/out around the canvas center
- Reset the view
- Zoom percentage for status display

Only active when the current program has a pan_zoom state.
"""

from PyQt5.QtCore import Qt

from constants import ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR
from models.transform import Vec2


class CanvasZoomPanMixin:
    """Mixin providing zoom and pan actions for the canvas."""

    # Expected state variables (initialized in main class):
    # - program: BaseProgram, optionally with a pan_zoom attribute
    # - zoomChanged: pyqtSignal(int)

    def _pan_zoom(self):
        return getattr(self.program, 'pan_zoom', None)

    def _view_center(self):
        return Vec2(self.width() / 2.0, self.height() / 2.0)

    def zoom_in(self):
        """Zoom in around the canvas center."""
        pan_zoom = self._pan_zoom()
        if pan_zoom and pan_zoom.zoom_by(ZOOM_IN_FACTOR, self._view_center()):
            self.update()
            self._emit_zoom()

    def zoom_out(self):
        """Zoom out around the canvas center."""
        pan_zoom = self._pan_zoom()
        if pan_zoom and pan_zoom.zoom_by(ZOOM_OUT_FACTOR, self._view_center()):
            self.update()
            self._emit_zoom()

    def zoom_reset(self):
        """Reset zoom to 100% and pan to the origin."""
        pan_zoom = self._pan_zoom()
        if pan_zoom:
            pan_zoom.reset()
            self.update()
            self._emit_zoom()

    def get_zoom_percent(self):
        """Get current zoom percentage (100 when the program has no view)."""
        pan_zoom = self._pan_zoom()
        if not pan_zoom:
            return 100
        return int(round(pan_zoom.scale * 100))

    def _emit_zoom(self):
        self.zoomChanged.emit(self.get_zoom_percent())

    # ========================================
    # Keyboard
    # ========================================

    def _handle_zoom_key(self, event):
        """Handle zoom shortcuts. Returns True if event was handled."""
        if not self._pan_zoom():
            return False
        key = event.key()
        if key in (Qt.Key_Plus, Qt.Key_Equal):
            self.zoom_in()
            return True
        if key == Qt.Key_Minus:
            self.zoom_out()
            return True
        if key == Qt.Key_0:
            self.zoom_reset()
            return True
        return False

    def _update_pan_cursor(self):
        """Closed hand while panning."""
        pan_zoom = self._pan_zoom()
        if pan_zoom and pan_zoom.is_panning:
            self.setCursor(Qt.ClosedHandCursor)
            return True
        return False
