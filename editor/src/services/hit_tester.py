"""Hit-testing against the bounding box, the shape outline and the handles."""

from typing import Optional, Sequence

from constants import HANDLE_HIT_RADIUS
from models.transform import BoundingBox, Handle
from utils.affine_math import inverse_transform_point


def point_in_box(mx, my, box: BoundingBox) -> bool:
    """Axis-aligned containment with inclusive bounds."""
    return box.x <= mx <= box.right and box.y <= my <= box.bottom


def point_in_shape(mx, my, shape) -> bool:
    """Test a screen point against the transformed ellipse.

    The point is moved into the shape's local frame (translation, then
    rotation, then shear undone) and classified with the standard ellipse
    equation. A degenerate shear makes the point unclassifiable, which is
    reported as outside.
    """
    local = inverse_transform_point(mx - shape.center_x, my - shape.center_y,
                                    shape.shear_x, shape.shear_y, shape.rotation)
    if local is None:
        return False
    if shape.radius_x <= 0 or shape.radius_y <= 0:
        return False

    lx, ly = local
    value = (lx * lx) / (shape.radius_x * shape.radius_x) + \
            (ly * ly) / (shape.radius_y * shape.radius_y)
    return value <= 1.0


def find_handle_hit(handles: Sequence[Handle], mx, my,
                    radius: float = HANDLE_HIT_RADIUS) -> Optional[Handle]:
    """First handle, in sequence order, within radius of the pointer."""
    radius_sq = radius * radius
    for handle in handles:
        dx = mx - handle.x
        dy = my - handle.y
        if dx * dx + dy * dy <= radius_sq:
            return handle
    return None
