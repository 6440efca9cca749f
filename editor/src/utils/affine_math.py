"""Affine math for the ellipse transform.

The shape's local coordinates are mapped to the screen by a fixed chain:
shear first, then rotation, then translation by the shape center.
Translation is left to callers; these helpers only handle the linear part.
"""

import math

from constants import DEGENERATE_SHEAR_EPSILON


def rotate_point(x, y, angle):
	"""Rotate (x, y) about the origin by angle radians."""
	cos_a = math.cos(angle)
	sin_a = math.sin(angle)
	return (
		x * cos_a - y * sin_a,
		x * sin_a + y * cos_a,
	)


def shear_point(x, y, shear_x, shear_y):
	"""Apply the shear matrix [[1, shear_x], [shear_y, 1]] to (x, y)."""
	return (
		x + shear_x * y,
		y + shear_y * x,
	)


def shear_determinant(shear_x, shear_y):
	"""Determinant of the shear matrix."""
	return 1.0 - shear_x * shear_y


def is_degenerate_shear(shear_x, shear_y):
	"""True when the shear matrix is too close to singular to invert."""
	return abs(shear_determinant(shear_x, shear_y)) < DEGENERATE_SHEAR_EPSILON


def transform_point(x, y, shear_x, shear_y, rotation):
	"""Map a local point to (untranslated) screen space.

	Args:
		x, y: Point in local ellipse coordinates
		shear_x, shear_y: Shear factors
		rotation: Rotation in radians

	Returns:
		(x', y'): Sheared then rotated point
	"""
	sx, sy = shear_point(x, y, shear_x, shear_y)
	return rotate_point(sx, sy, rotation)


def inverse_transform_point(x, y, shear_x, shear_y, rotation):
	"""Map an (untranslated) screen point back to local coordinates.

	Undoes the rotation first, then applies the closed-form inverse of the
	shear matrix: (1/det) * [[1, -shear_x], [-shear_y, 1]].

	Returns:
		(x', y') in local coordinates, or None when the shear is degenerate
		and the point cannot be classified.
	"""
	det = shear_determinant(shear_x, shear_y)
	if abs(det) < DEGENERATE_SHEAR_EPSILON:
		return None

	rx, ry = rotate_point(x, y, -rotation)

	inv00 = 1.0 / det
	inv01 = -shear_x / det
	inv10 = -shear_y / det
	inv11 = 1.0 / det

	return (
		rx * inv00 + ry * inv01,
		rx * inv10 + ry * inv11,
	)
