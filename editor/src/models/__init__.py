"""
Ellipse Transform Editor - Data Models

This module contains the data model classes for the edited shape.
This is the MODEL in MVC architecture.

Public API: EllipseShape plus the box/handle/drag value types.
"""

from .transform import Vec2, BoundingBox, Handle, HandleRole, Anchor, EditMode, CORNER_ROLES
from .ellipse import EllipseShape
from .drag_context import DragContext

__all__ = ['Vec2', 'BoundingBox', 'Handle', 'HandleRole', 'Anchor', 'EditMode', 'CORNER_ROLES', 'EllipseShape', 'DragContext']
