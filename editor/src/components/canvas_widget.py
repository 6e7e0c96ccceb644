"""
Canvas Widget - hosts one canvas program

Translates Qt mouse/wheel events into CanvasEvents for the program and
paints whatever the program renders. The widget holds no shape state of
its own; the rotation angle is pushed in by the main window.
"""

import logging

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter

from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin
from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from models.events import CanvasEvent, EventKind, MouseButton
from models.transform import Bounds, Vec2

logger = logging.getLogger(__name__)

QT_BUTTONS = {
	Qt.LeftButton: MouseButton.LEFT,
	Qt.RightButton: MouseButton.RIGHT,
	Qt.MiddleButton: MouseButton.MIDDLE,
}


class CanvasWidget(CanvasRenderingMixin, CanvasZoomPanMixin, QWidget):
	"""QWidget adapter around a BaseProgram."""

	# Signals
	messageEmitted = pyqtSignal(object)  # Derived program message (e.g. CursorMoved)
	zoomChanged = pyqtSignal(int)  # Zoom percent after a view change

	def __init__(self, program, parent=None):
		super().__init__(parent)
		self.program = program
		self.rotation_angle = 0.0

		self.setMouseTracking(True)
		self.setFocusPolicy(Qt.StrongFocus)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

	def bounds(self):
		"""Render surface in local pixels."""
		return Bounds.from_size(self.width(), self.height())

	def set_program(self, program):
		logger.debug("Switching canvas program to %s", type(program).__name__)
		self.program = program
		self.program.set_rotation(self.rotation_angle)
		self.unsetCursor()
		self.update()

	def set_rotation(self, angle):
		"""Push the application's rotation angle down to the program."""
		self.rotation_angle = angle
		self.program.set_rotation(angle)
		self.update()

	# ========================================
	# Event Dispatch
	# ========================================

	def dispatch(self, canvas_event, pos):
		"""Send one event to the program.

		Args:
			canvas_event: CanvasEvent
			pos: QPoint/QPointF cursor position in widget coordinates

		Returns:
			bool: True if the program consumed the event
		"""
		cursor = Vec2(float(pos.x()), float(pos.y()))
		consumed, message = self.program.on_event(canvas_event, self.bounds(), cursor)
		if message is not None:
			self.messageEmitted.emit(message)
		if consumed:
			self.update()
			if canvas_event.kind is EventKind.WHEEL_SCROLLED:
				self._emit_zoom()
		self._update_cursor(cursor)
		return consumed

	def _update_cursor(self, cursor):
		if self._update_pan_cursor():
			return
		shape = self.program.cursor_shape(self.bounds(), cursor)
		if shape is None:
			self.unsetCursor()
		else:
			self.setCursor(shape)

	def mousePressEvent(self, event):
		button = QT_BUTTONS.get(event.button())
		if button is None or not self.dispatch(CanvasEvent.pressed(button), event.pos()):
			event.ignore()
			return
		event.accept()

	def mouseReleaseEvent(self, event):
		button = QT_BUTTONS.get(event.button())
		if button is None or not self.dispatch(CanvasEvent.released(button), event.pos()):
			event.ignore()
			return
		event.accept()

	def mouseMoveEvent(self, event):
		if not self.dispatch(CanvasEvent.moved(), event.pos()):
			event.ignore()
			return
		event.accept()

	def wheelEvent(self, event):
		delta = event.angleDelta().y()
		if delta == 0 or not self.dispatch(CanvasEvent.wheel(delta), event.position()):
			event.ignore()
			return
		event.accept()

	def keyPressEvent(self, event):
		if self._handle_zoom_key(event):
			event.accept()
			return
		super().keyPressEvent(event)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			self._paint_primitives(painter, self.program.render(self.bounds(), self.rotation_angle))
		finally:
			painter.end()
