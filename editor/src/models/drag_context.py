"""Drag context dataclass for handle drags.

One object per handle drag: the grabbed handle and the point held fixed.
"""

from dataclasses import dataclass

from models.transform import Anchor, Handle


@dataclass(frozen=True)
class DragContext:
    """Drag state for one press-move-release cycle on a handle.

    handle is the handle grabbed at press time; its role decides which
    update each move applies. anchor is the screen point held fixed for
    the whole drag: the opposite box corner for a corner resize, the
    shape center otherwise.
    """
    handle: Handle
    anchor: Anchor

    @property
    def operation(self):
        """'resize', 'shear_x' or 'shear_y' depending on the handle role."""
        role = self.handle.role
        if role.is_corner:
            return 'resize'
        if role.value in ('top-middle', 'bottom-middle'):
            return 'shear_x'
        return 'shear_y'
