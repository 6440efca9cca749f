"""Bounding box sampling for the transformed ellipse.

The exact box of a sheared and rotated ellipse needs a trigonometric
extremum solve. Instead the outline is sampled as a closed polyline and
the box is the min/max of the samples. Handle positions and the
anchor-preserving resize are both defined against this sampled box.
"""

import numpy as np
from typing import List

from constants import SAMPLE_STEPS
from models.transform import BoundingBox, Handle, HandleRole


def sample_points(shape, steps: int = SAMPLE_STEPS) -> np.ndarray:
    """Sample the transformed outline of a shape.

    Args:
        shape: EllipseShape to sample
        steps: Number of segments; steps + 1 points are returned

    Returns:
        (steps + 1, 2) array of screen-space points. The first and last
        rows are both at t = 0 (mod 2*pi), closing the polyline.
    """
    t = 2.0 * np.pi * np.arange(steps + 1) / steps
    local_x = shape.radius_x * np.cos(t)
    local_y = shape.radius_y * np.sin(t)

    # Shear, then rotate (same chain as utils.affine_math.transform_point)
    sheared_x = local_x + shape.shear_x * local_y
    sheared_y = local_y + shape.shear_y * local_x

    cos_r = np.cos(shape.rotation)
    sin_r = np.sin(shape.rotation)
    screen_x = sheared_x * cos_r - sheared_y * sin_r + shape.center_x
    screen_y = sheared_x * sin_r + sheared_y * cos_r + shape.center_y

    return np.column_stack((screen_x, screen_y))


def bounding_box_of(points) -> BoundingBox:
    """Axis-aligned box of a point sequence (min/max reduction)."""
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        raise ValueError("Cannot compute the bounding box of an empty point set")
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return BoundingBox(float(min_x), float(min_y),
                       float(max_x - min_x), float(max_y - min_y))


def shape_bounding_box(shape, steps: int = SAMPLE_STEPS) -> BoundingBox:
    """Sampled bounding box of a shape in screen space."""
    return bounding_box_of(sample_points(shape, steps))


def handles_of(box: BoundingBox) -> List[Handle]:
    """Eight handles of a box: four corners, then four edge midpoints."""
    mid_x = box.x + box.width / 2
    mid_y = box.y + box.height / 2
    return [
        # Corners
        Handle(box.x, box.y, HandleRole.TOP_LEFT),
        Handle(box.right, box.y, HandleRole.TOP_RIGHT),
        Handle(box.x, box.bottom, HandleRole.BOTTOM_LEFT),
        Handle(box.right, box.bottom, HandleRole.BOTTOM_RIGHT),

        # Midpoints
        Handle(mid_x, box.y, HandleRole.TOP_MIDDLE),
        Handle(mid_x, box.bottom, HandleRole.BOTTOM_MIDDLE),
        Handle(box.x, mid_y, HandleRole.LEFT_MIDDLE),
        Handle(box.right, mid_y, HandleRole.RIGHT_MIDDLE),
    ]


def opposite_corner(box: BoundingBox, role) -> tuple:
    """Box corner diagonally opposite a corner handle.

    Returns:
        (Vec2, HandleRole): Position and role of the opposite corner

    Raises:
        ValueError: If role is a midpoint handle
    """
    opposite = HandleRole(role).opposite()
    return box.corner(opposite), opposite
