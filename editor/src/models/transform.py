"""Transform data structures for coordinates, boxes and handles."""
from dataclasses import dataclass
from enum import Enum


@dataclass
class Vec2:
    """2D vector for coordinate pairs in screen space."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


class HandleRole(str, Enum):
    """Role of one of the eight bounding-box handles.

    Declaration order is the enumeration order used for hit-testing:
    corners before midpoints.
    """
    TOP_LEFT = 'top-left'
    TOP_RIGHT = 'top-right'
    BOTTOM_LEFT = 'bottom-left'
    BOTTOM_RIGHT = 'bottom-right'
    TOP_MIDDLE = 'top-middle'
    BOTTOM_MIDDLE = 'bottom-middle'
    LEFT_MIDDLE = 'left-middle'
    RIGHT_MIDDLE = 'right-middle'

    @property
    def is_middle(self):
        return 'middle' in self.value

    @property
    def is_corner(self):
        return not self.is_middle

    @property
    def is_left(self):
        return 'left' in self.value

    @property
    def is_top(self):
        return 'top' in self.value

    def opposite(self):
        """Corner diagonally across the box. Only defined for corners."""
        if self.is_middle:
            raise ValueError(f"Midpoint handle {self.value} has no opposite corner")
        return _OPPOSITE_CORNERS[self]


_OPPOSITE_CORNERS = {
    HandleRole.TOP_LEFT: HandleRole.BOTTOM_RIGHT,
    HandleRole.TOP_RIGHT: HandleRole.BOTTOM_LEFT,
    HandleRole.BOTTOM_LEFT: HandleRole.TOP_RIGHT,
    HandleRole.BOTTOM_RIGHT: HandleRole.TOP_LEFT,
}

CORNER_ROLES = (
    HandleRole.TOP_LEFT, HandleRole.TOP_RIGHT,
    HandleRole.BOTTOM_LEFT, HandleRole.BOTTOM_RIGHT,
)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned screen-space box: top-left corner plus size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def center(self):
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def corner(self, role):
        """Screen position of the box corner matching a corner role."""
        role = HandleRole(role)
        if role.is_middle:
            raise ValueError(f"{role.value} is not a corner role")
        return Vec2(
            self.x if role.is_left else self.right,
            self.y if role.is_top else self.bottom,
        )

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class Handle:
    """One interactive control point derived from the bounding box."""
    x: float
    y: float
    role: HandleRole

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'role': self.role.value}


@dataclass(frozen=True)
class Anchor:
    """Screen point held fixed during a drag.

    role is the box corner the point belongs to, or None when the anchor
    is the shape center (shear and rotate drags).
    """
    point: Vec2
    role: HandleRole = None


class EditMode(str, Enum):
    """What a handle drag does while the box is visible."""
    RESIZE_SHEAR = 'resize-shear'
    ROTATE = 'rotate'

    def toggled(self):
        if self is EditMode.RESIZE_SHEAR:
            return EditMode.ROTATE
        return EditMode.RESIZE_SHEAR
