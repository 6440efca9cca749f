"""
Ellipse Canvas - Drawing surface for the interactive ellipse editor

Provides:
- Pointer wiring: left button press/move/release and right click go to
  the interaction controller
- Rendering of the shape outline, the creation preview, the bounding box,
  the 8 handles (circles or half-arcs by edit mode) and the anchor cross
"""

import math

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor, QPolygonF

from components.transform_widgets import create_mode, draw_anchor_cross
from constants import (
	SAMPLE_STEPS, SHAPE_COLOR, SHAPE_LINE_WIDTH, BOX_COLOR, BOX_LINE_WIDTH,
	CANVAS_BACKGROUND_COLOR
)
from services.bbox_sampler import sample_points
from services.hit_tester import find_handle_hit
from services.interaction_controller import InteractionController


class EllipseCanvas(QWidget):
	"""Canvas widget that renders the controller state and forwards pointer events"""

	# Signals
	shapeChanged = pyqtSignal()  # Emitted after any event that changed the shape or view
	editModeChanged = pyqtSignal(str)  # Emitted with the new EditMode value

	def __init__(self, parent=None, controller=None):
		super().__init__(parent)
		self.setMouseTracking(True)
		self.setFocusPolicy(Qt.StrongFocus)
		# Right click is handled as a hide action, not a menu
		self.setContextMenuPolicy(Qt.PreventContextMenu)

		self.controller = controller if controller else InteractionController()
		self._mode = create_mode(self.controller.edit_mode)

	@property
	def mode(self):
		"""TransformMode matching the controller's current edit mode"""
		return self._mode

	def reset(self):
		"""Discard the shape and start over"""
		self.controller.reset()
		self._after_event(True)

	# ------------------------------------------------------------------
	# Pointer wiring
	# ------------------------------------------------------------------

	def mousePressEvent(self, event):
		"""Handle mouse press"""
		pos = event.localPos()
		if event.button() == Qt.LeftButton:
			self._after_event(self.controller.pointer_down(pos.x(), pos.y()))
			event.accept()
			return
		if event.button() == Qt.RightButton:
			self._after_event(self.controller.secondary_action(pos.x(), pos.y()))
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		"""Handle mouse move"""
		pos = event.localPos()
		self._after_event(self.controller.pointer_move(pos.x(), pos.y()))
		self._update_cursor(pos.x(), pos.y())
		event.accept()

	def mouseReleaseEvent(self, event):
		"""Handle mouse release"""
		if event.button() == Qt.LeftButton:
			pos = event.localPos()
			self._after_event(self.controller.pointer_up(pos.x(), pos.y()))
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def contextMenuEvent(self, event):
		"""Keyboard-triggered context menu also hides the box"""
		self._after_event(self.controller.secondary_action(event.pos().x(), event.pos().y()))
		event.accept()

	def _after_event(self, redraw):
		"""Sync mode, signals and repaint after the controller handled an event"""
		if self._mode.edit_mode is not self.controller.edit_mode:
			self._mode = create_mode(self.controller.edit_mode)
			self.editModeChanged.emit(self.controller.edit_mode.value)
		if redraw:
			self.shapeChanged.emit()
			self.update()

	def _update_cursor(self, mx, my):
		"""Show the handle cursor while hovering over a visible handle"""
		if self.controller.is_dragging:
			return
		handle = None
		if self.controller.box_visible:
			handle = find_handle_hit(self.controller.handles(), mx, my)
		self.setCursor(self._mode.get_cursor(handle))

	# ------------------------------------------------------------------
	# Rendering
	# ------------------------------------------------------------------

	def paintEvent(self, event):
		"""Draw the shape, bounding box, handles and anchor cross"""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(*CANVAS_BACKGROUND_COLOR))

		controller = self.controller
		if not (controller.is_creating or controller.has_shape):
			painter.end()
			return

		shape = controller.shape
		# Skip painting with invalid values
		if any(math.isnan(v) for v in (shape.center_x, shape.center_y, shape.radius_x,
		                               shape.radius_y, shape.rotation, shape.shear_x, shape.shear_y)):
			painter.end()
			return

		self._paint_shape(painter, shape)

		if controller.box_visible:
			box = controller.bounding_box()
			self._paint_box(painter, box)
			# Handles are hidden while a drag is in progress
			if not controller.is_dragging:
				self._mode.draw_handles(painter, controller.handles())

		anchor = controller.active_anchor
		if anchor is not None:
			draw_anchor_cross(painter, anchor.point.x, anchor.point.y)

		painter.end()

	def _paint_shape(self, painter, shape):
		"""Paint the 60-segment outline of the transformed ellipse"""
		points = sample_points(shape, SAMPLE_STEPS)
		polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in points])
		painter.setPen(QPen(QColor(*SHAPE_COLOR), SHAPE_LINE_WIDTH))
		painter.setBrush(Qt.NoBrush)
		painter.drawPolygon(polygon)

	def _paint_box(self, painter, box):
		"""Paint the axis-aligned bounding box"""
		painter.setPen(QPen(QColor(*BOX_COLOR), BOX_LINE_WIDTH))
		painter.setBrush(Qt.NoBrush)
		painter.drawRect(QRectF(box.x, box.y, box.width, box.height))
