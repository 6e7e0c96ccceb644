"""Planar geometry helpers.

Rotation about a pivot and hit-testing against a thick horizontal line
and its four corner handles. Angles are in degrees; with the Y-down
screen convention a positive angle turns clockwise on screen.
"""

import logging
import math

import numpy as np

from constants import LINE_CORNER_TOLERANCE, HORIZONTAL_LINE_EPSILON, MIN_POLYGON_EDGES
from models.transform import Vec2
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


class NonHorizontalLineError(ValueError):
	"""Raised by strict hit-tests when the segment is not horizontal."""


def rotation_matrix(angle_degrees):
	"""2x2 rotation matrix for angle_degrees."""
	angle = math.radians(angle_degrees)
	cos_a = math.cos(angle)
	sin_a = math.sin(angle)
	return np.array([[cos_a, -sin_a], [sin_a, cos_a]])


def rotate_point(point, center, angle_degrees):
	"""Rotate point about center by angle_degrees.

	rotate_point(rotate_point(p, c, a), c, -a) gives back p up to float error.

	Args:
		point: Vec2 to rotate
		center: Vec2 pivot
		angle_degrees: Rotation angle in degrees

	Returns:
		Vec2: Rotated point
	"""
	angle = math.radians(angle_degrees)
	sin_a = math.sin(angle)
	cos_a = math.cos(angle)

	dx = point.x - center.x
	dy = point.y - center.y

	rotated_x = dx * cos_a - dy * sin_a
	rotated_y = dx * sin_a + dy * cos_a

	return Vec2(rotated_x + center.x, rotated_y + center.y)


def rotate_points(points, center, angle_degrees):
	"""Rotate many points about center at once.

	Same result as calling rotate_point on each point.

	Returns:
		list of Vec2
	"""
	if not points:
		return []
	coords = np.array([[p.x, p.y] for p in points], dtype=float)
	pivot = np.array([center.x, center.y], dtype=float)
	rotated = (coords - pivot) @ rotation_matrix(angle_degrees).T + pivot
	return [Vec2(float(x), float(y)) for x, y in rotated]


def rotate_line(start, end, center, angle_degrees):
	"""Rotate both endpoints of a segment. Returns (start, end)."""
	return (
		rotate_point(start, center, angle_degrees),
		rotate_point(end, center, angle_degrees),
	)


def rotate_rectangle_corners(center, width, height, angle_degrees):
	"""Corners of a width x height rectangle centered at center, rotated.

	Order before rotation: top-left, top-right, bottom-right, bottom-left.
	"""
	half_w = width / 2.0
	half_h = height / 2.0
	corners = [
		Vec2(center.x - half_w, center.y - half_h),
		Vec2(center.x + half_w, center.y - half_h),
		Vec2(center.x + half_w, center.y + half_h),
		Vec2(center.x - half_w, center.y + half_h),
	]
	return rotate_points(corners, center, angle_degrees)


def rotate_rectangle(x, y, width, height, center, angle_degrees):
	"""Corners of the rectangle with top-left (x, y), rotated about center.

	Same corner order as rotate_rectangle_corners.
	"""
	corners = [
		Vec2(x, y),
		Vec2(x + width, y),
		Vec2(x + width, y + height),
		Vec2(x, y + height),
	]
	return rotate_points(corners, center, angle_degrees)


def regular_polygon_points(edges, center, radius):
	"""Vertices of a regular polygon, first vertex on the +X axis.

	edges is floored at 3.
	"""
	edges = max(MIN_POLYGON_EDGES, int(edges))
	angles = np.arange(edges) * (2.0 * math.pi / edges)
	xs = center.x + radius * np.cos(angles)
	ys = center.y + radius * np.sin(angles)
	return [Vec2(float(x), float(y)) for x, y in zip(xs, ys)]


# ======================================================================
# Hit-testing
# ======================================================================

def is_point_on_horizontal_line(point, line_start, line_end, tolerance, strict=False):
	"""Check whether point lies on a horizontal segment within tolerance.

	True iff point.x is within [min(start.x, end.x), max(start.x, end.x)]
	and point.y is within [min(start.y, end.y) - tolerance,
	max(start.y, end.y) + tolerance]. Both ranges are inclusive.

	Only horizontal segments are supported. A non-horizontal segment is
	logged and tested anyway (the result may be wrong), unless strict is
	set, in which case NonHorizontalLineError is raised.
	"""
	if abs(line_start.y - line_end.y) > HORIZONTAL_LINE_EPSILON:
		if strict:
			loggerRaise(NonHorizontalLineError(
				f"Segment {line_start} -> {line_end} is not horizontal"))
		logger.warning("is_point_on_horizontal_line: only horizontal lines are supported "
		               "(start.y=%.4f, end.y=%.4f)", line_start.y, line_end.y)

	if point.x < min(line_start.x, line_end.x) or point.x > max(line_start.x, line_end.x):
		return False
	if (point.y < min(line_start.y, line_end.y) - tolerance
			or point.y > max(line_start.y, line_end.y) + tolerance):
		return False
	return True


def line_corners(line_start, line_end, width):
	"""Four corners of a thick horizontal line.

	0=upper-left, 1=upper-right, 2=lower-right, 3=lower-left, defined
	from start/end as given (not re-sorted).
	"""
	half = width / 2.0
	return [
		Vec2(line_start.x, line_start.y - half),
		Vec2(line_end.x, line_end.y - half),
		Vec2(line_end.x, line_end.y + half),
		Vec2(line_start.x, line_start.y + half),
	]


def is_point_on_line_corner(point, line_start, line_end, width, tolerance=LINE_CORNER_TOLERANCE):
	"""Index of the first corner within tolerance of point (per axis), else None."""
	for index, corner in enumerate(line_corners(line_start, line_end, width)):
		if abs(point.x - corner.x) <= tolerance and abs(point.y - corner.y) <= tolerance:
			return index
	return None
