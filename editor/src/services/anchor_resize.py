"""Anchor-preserving corner resize.

Dragging a corner handle changes the radii, and the center must move so
the opposite corner of the sampled bounding box stays where it was on
screen. With shear and rotation the box is not a linear function of the
radii, so the new center cannot be written as anchor + sign * radius.
Instead the box of a zero-centered copy of the resized shape is sampled;
the offset from that box's anchor corner to the anchor's screen position
is the new center.
"""

from constants import MIN_RADIUS, SAMPLE_STEPS
from models.ellipse import EllipseShape
from models.transform import HandleRole
from services.bbox_sampler import shape_bounding_box


def corner_signs(role):
    """(sign_x, sign_y) for a corner role: -1 on the left/top sides."""
    role = HandleRole(role)
    sign_x = -1 if role.is_left else 1
    sign_y = -1 if role.is_top else 1
    return sign_x, sign_y


def center_for_anchor(radius_x, radius_y, shear_x, shear_y, rotation,
                      anchor_role, anchor_point, steps=SAMPLE_STEPS):
    """Center that puts the box corner anchor_role at anchor_point.

    Args:
        radius_x, radius_y: New radii
        shear_x, shear_y, rotation: Current transform parameters
        anchor_role: Which box corner is held fixed
        anchor_point: Screen position (x, y) of that corner
        steps: Sampling resolution of the bounding box

    Returns:
        (center_x, center_y)
    """
    probe = EllipseShape(
        center_x=0.0, center_y=0.0,
        radius_x=radius_x, radius_y=radius_y,
        rotation=rotation, shear_x=shear_x, shear_y=shear_y,
    )
    box = shape_bounding_box(probe, steps)
    corner = box.corner(anchor_role)
    anchor_x, anchor_y = anchor_point
    # The probe box is centered on the origin, so the offset is the center
    return anchor_x - corner.x, anchor_y - corner.y


def resize_from_corner(shape, role, dx, dy, anchor, min_radius=MIN_RADIUS):
    """Resize shape by dragging corner role by (dx, dy).

    Args:
        shape: EllipseShape before this move step
        role: Corner being dragged
        dx, dy: Pointer displacement since the previous move event
        anchor: Anchor holding the opposite corner's screen position
        min_radius: Floor applied to both radii

    Returns:
        New EllipseShape with updated radii and center

    Raises:
        ValueError: If role is not a corner or the anchor has no corner role
    """
    role = HandleRole(role)
    if role.is_middle:
        raise ValueError(f"Corner resize requested for midpoint handle {role.value}")
    if anchor.role is None:
        raise ValueError("Corner resize needs an anchor on a box corner")

    sign_x, sign_y = corner_signs(role)
    resized = shape.copy(
        radius_x=shape.radius_x + sign_x * dx,
        radius_y=shape.radius_y + sign_y * dy,
    ).clamp_radii(min_radius)

    center_x, center_y = center_for_anchor(
        resized.radius_x, resized.radius_y,
        resized.shear_x, resized.shear_y, resized.rotation,
        anchor.role, anchor.point,
    )
    return resized.moved_to(center_x, center_y)
