"""
Ellipse Transform Editor - Transform Widget Components

This package contains the transform widget pieces:
- handles.py: Handle painters (filled circles, rotate-mode arcs) and the anchor cross
- modes.py: Mode classes pairing an edit mode with its handle painter
"""

from .handles import HandlePainter, CircleHandlePainter, ArcHandlePainter, anchor_cross_lines, draw_anchor_cross
from .modes import TransformMode, ResizeShearMode, RotateMode, create_mode

__all__ = [
    'HandlePainter', 'CircleHandlePainter', 'ArcHandlePainter',
    'anchor_cross_lines', 'draw_anchor_cross',
    'TransformMode', 'ResizeShearMode', 'RotateMode', 'create_mode',
]
