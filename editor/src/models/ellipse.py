"""Ellipse shape record.

Pure data plus validation. All editing policy lives in
services.interaction_controller so the transform math and the editing
rules stay separable.
"""
from dataclasses import dataclass, replace

from constants import MIN_RADIUS
from models.transform import Handle, HandleRole
from utils.affine_math import shear_determinant, is_degenerate_shear


@dataclass
class EllipseShape:
    """Ellipse under a shear -> rotation -> translation transform.

    center_x, center_y: Screen position of the local origin
    radius_x, radius_y: Semi-axes in local (pre-shear) coordinates
    rotation: Radians, accumulates without wraparound
    shear_x, shear_y: Shear factors
    active_handle: Handle being dragged, None when no drag is in progress
    """
    center_x: float = 0.0
    center_y: float = 0.0
    radius_x: float = 0.0
    radius_y: float = 0.0
    rotation: float = 0.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    active_handle: Handle = None

    def copy(self, **changes):
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def moved_to(self, center_x, center_y):
        return self.copy(center_x=center_x, center_y=center_y)

    def clamp_radii(self, minimum=MIN_RADIUS):
        """Return a copy with both radii raised to at least minimum."""
        return self.copy(
            radius_x=max(minimum, self.radius_x),
            radius_y=max(minimum, self.radius_y),
        )

    def shear_determinant(self):
        return shear_determinant(self.shear_x, self.shear_y)

    def is_degenerate(self):
        return is_degenerate_shear(self.shear_x, self.shear_y)

    def to_dict(self):
        return {
            'center_x': self.center_x,
            'center_y': self.center_y,
            'radius_x': self.radius_x,
            'radius_y': self.radius_y,
            'rotation': self.rotation,
            'shear_x': self.shear_x,
            'shear_y': self.shear_y,
            'active_handle': self.active_handle.to_dict() if self.active_handle else None,
        }

    @classmethod
    def from_dict(cls, data):
        handle = data.get('active_handle')
        if handle is not None:
            handle = Handle(handle['x'], handle['y'], HandleRole(handle['role']))
        return cls(
            center_x=float(data.get('center_x', 0.0)),
            center_y=float(data.get('center_y', 0.0)),
            radius_x=float(data.get('radius_x', 0.0)),
            radius_y=float(data.get('radius_y', 0.0)),
            rotation=float(data.get('rotation', 0.0)),
            shear_x=float(data.get('shear_x', 0.0)),
            shear_y=float(data.get('shear_y', 0.0)),
            active_handle=handle,
        )
