"""Shape interaction modes - defines which handles are active for each shape kind."""

from .handles import LineCornerHandle, LineBodyHandle, RectangleBodyHandle


class TransformMode:
	"""Base class for interaction modes."""

	def __init__(self):
		self.handles = {}  # handle_type -> handle_object

	def get_handles(self):
		"""Return all handles for this mode."""
		return self.handles

	def get_handle_at_pos(self, point, shape):
		"""Find which handle (if any) is at point.

		Args:
			point: Vec2 in the shape's coordinate space
			shape: Shape the handles belong to

		Returns:
			Handle object or None
		"""
		# Check handles in priority order
		for handle_type, handle in self.handles.items():
			if handle.hit_test(point, shape):
				return handle
		return None


class LineMode(TransformMode):
	"""Thick horizontal line - four corner handles, then the body.

	Handles are checked in insertion order, so corners win over the body.
	"""

	def __init__(self):
		super().__init__()

		self.handles = {
			'corner_0': LineCornerHandle(0),  # upper-left
			'corner_1': LineCornerHandle(1),  # upper-right
			'corner_2': LineCornerHandle(2),  # lower-right
			'corner_3': LineCornerHandle(3),  # lower-left
			'body': LineBodyHandle(),
		}

class RectangleMode(TransformMode):
	"""Axis-aligned rectangle - body drag only."""

	def __init__(self):
		super().__init__()

		self.handles = {
			'body': RectangleBodyHandle(),
		}


# Mode registry
MODES = {
	'line': LineMode,
	'rectangle': RectangleMode,
}


def create_mode(mode_name):
	"""Factory function to create mode instances.

	Args:
		mode_name: 'line' or 'rectangle'

	Returns:
		TransformMode instance
	"""
	mode_class = MODES.get(mode_name)
	if mode_class is None:
		raise ValueError(f"Unknown transform mode: {mode_name}")
	return mode_class()
