"""Coordinate transformation utilities for canvas rendering.

Provides conversion between different coordinate systems:
- Relative shape space (fraction of frame extent, Y-down)
- Absolute frame pixels (Y-down, origin at the frame's top-left)
- Rotated shape space (undoing the shape's visual rotation)
- Scene space behind a pan/zoom view transform
"""

from models.transform import Vec2
from utils.geometry import rotate_point


def rel_to_abs_point(rel_point, frame_width, frame_height):
	"""Scale a relative point to absolute frame pixels.

	Args:
		rel_point: Vec2 in relative units (0-1 across the frame, not clamped)
		frame_width, frame_height: Frame extent in pixels

	Returns:
		Vec2: Absolute pixel position
	"""
	return Vec2(rel_point.x * frame_width, rel_point.y * frame_height)


def rel_to_abs_rect(rel_x, rel_y, rel_width, rel_height, frame_width, frame_height):
	"""Scale a relative rectangle to absolute pixels.

	Returns:
		(x, y, width, height) in pixels
	"""
	return (
		rel_x * frame_width,
		rel_y * frame_height,
		rel_width * frame_width,
		rel_height * frame_height,
	)


def abs_to_rel_point(abs_point, frame_width, frame_height):
	"""Inverse of rel_to_abs_point."""
	return Vec2(abs_point.x / frame_width, abs_point.y / frame_height)


def cursor_position_in(bounds, cursor):
	"""Cursor position local to bounds, or None when outside.

	Args:
		bounds: Bounds of the render surface in parent coordinates
		cursor: Vec2 cursor in parent coordinates, or None if unknown

	Returns:
		Vec2 relative to the bounds' top-left, or None
	"""
	if cursor is None or not bounds.contains(cursor):
		return None
	return local_position(bounds, cursor)


def local_position(bounds, cursor):
	"""Cursor position relative to the bounds' top-left, inside or not.

	Used to keep following a drag that has left the render surface.
	Returns None only when the cursor is unknown.
	"""
	if cursor is None:
		return None
	return Vec2(cursor.x - bounds.x, cursor.y - bounds.y)


def screen_to_shape_space(cursor, bounds, rotation_angle):
	"""Map a local cursor position into a rotated shape's relative space.

	The cursor is rotated about the frame center by -rotation_angle, which
	undoes the shape's visual rotation, then divided by the frame extent.
	Hit-tests and drags must run in this space whenever the shape is
	drawn rotated.

	Args:
		cursor: Vec2 in local frame pixels
		bounds: Bounds of the frame
		rotation_angle: Current visual rotation in degrees

	Returns:
		Vec2: Relative coordinates comparable to stored shape geometry
	"""
	center = Vec2(bounds.width / 2.0, bounds.height / 2.0)
	unrotated = rotate_point(cursor, center, -rotation_angle)
	return Vec2(unrotated.x / bounds.width, unrotated.y / bounds.height)


def shape_space_to_screen(rel_point, bounds, rotation_angle):
	"""Inverse of screen_to_shape_space: relative point to rotated frame pixels."""
	center = Vec2(bounds.width / 2.0, bounds.height / 2.0)
	absolute = rel_to_abs_point(rel_point, bounds.width, bounds.height)
	return rotate_point(absolute, center, rotation_angle)


def scene_to_screen(point, view):
	"""Scene coordinates to screen pixels: point * scale + translation."""
	return Vec2(point.x * view.scale + view.translation.x,
	            point.y * view.scale + view.translation.y)


def screen_to_scene(point, view):
	"""Screen pixels to scene coordinates: (point - translation) / scale."""
	return Vec2((point.x - view.translation.x) / view.scale,
	            (point.y - view.translation.y) / view.scale)
