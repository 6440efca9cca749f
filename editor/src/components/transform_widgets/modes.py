"""Transform widget modes - defines how handles look and behave per edit mode."""

from PyQt5.QtCore import Qt

from .handles import CircleHandlePainter, ArcHandlePainter
from constants import HANDLE_DRAW_RADIUS
from models.transform import EditMode


class TransformMode:
	"""Base class for transform modes."""

	edit_mode = None
	label = ''

	def __init__(self, painter_class, radius=HANDLE_DRAW_RADIUS):
		self.handle_painter = painter_class(radius)

	def draw_handles(self, painter, handles):
		"""Draw every handle with this mode's painter."""
		for handle in handles:
			self.handle_painter.draw(painter, handle)

	def get_cursor(self, handle):
		"""Cursor for hovering over handle, or the arrow when handle is None."""
		if handle is None:
			return Qt.ArrowCursor
		return self.handle_painter.get_cursor(handle)


class ResizeShearMode(TransformMode):
	"""Corners resize with the opposite corner anchored, midpoints shear."""

	edit_mode = EditMode.RESIZE_SHEAR
	label = 'Resize / Shear'

	def __init__(self):
		super().__init__(CircleHandlePainter)


class RotateMode(TransformMode):
	"""Any handle rotates around the shape center."""

	edit_mode = EditMode.ROTATE
	label = 'Rotate'

	def __init__(self):
		super().__init__(ArcHandlePainter)


# Mode registry
MODES = {
	EditMode.RESIZE_SHEAR: ResizeShearMode,
	EditMode.ROTATE: RotateMode,
}


def create_mode(edit_mode):
	"""Factory function to create mode instances.

	Args:
		edit_mode: EditMode or its string value ('resize-shear', 'rotate')

	Returns:
		TransformMode instance

	Raises:
		ValueError: If edit_mode is not a known EditMode value
	"""
	mode_class = MODES[EditMode(edit_mode)]
	return mode_class()
