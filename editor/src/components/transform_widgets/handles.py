"""Handle painters for the ellipse transform widget.

Each painter knows how to draw one handle for a given edit mode and
which cursor to show over it. Handle positions and roles come from
services.bbox_sampler.handles_of; painters never compute geometry.
"""

from abc import ABC, abstractmethod
from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QPen, QBrush, QColor

from constants import (
    HANDLE_DRAW_RADIUS, ANCHOR_CROSS_SIZE, ANCHOR_LINE_WIDTH, ANCHOR_COLOR,
    RESIZE_HANDLE_COLOR, ROTATE_HANDLE_COLOR
)
from models.transform import HandleRole


class HandlePainter(ABC):
    """Abstract base class for handle painters."""

    def __init__(self, radius=HANDLE_DRAW_RADIUS):
        self.radius = radius

    @abstractmethod
    def draw(self, painter, handle):
        """Draw one handle.

        Args:
            painter: QPainter instance
            handle: models.transform.Handle to draw
        """
        pass

    @abstractmethod
    def get_cursor(self, handle):
        """Qt cursor shape to show while hovering over handle."""
        pass


class CircleHandlePainter(HandlePainter):
    """Filled circle - resize/shear mode."""

    def draw(self, painter, handle):
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(QColor(*RESIZE_HANDLE_COLOR)))
        painter.drawEllipse(QPointF(handle.x, handle.y), float(self.radius), float(self.radius))

    def get_cursor(self, handle):
        role = handle.role
        if role in (HandleRole.TOP_LEFT, HandleRole.BOTTOM_RIGHT):
            return Qt.SizeFDiagCursor
        if role in (HandleRole.TOP_RIGHT, HandleRole.BOTTOM_LEFT):
            return Qt.SizeBDiagCursor
        # Top/bottom midpoints shear along x, left/right along y
        if role in (HandleRole.TOP_MIDDLE, HandleRole.BOTTOM_MIDDLE):
            return Qt.SizeHorCursor
        return Qt.SizeVerCursor


class ArcHandlePainter(HandlePainter):
    """Lower half-circle outline - rotate mode."""

    def draw(self, painter, handle):
        painter.setPen(QPen(QColor(*ROTATE_HANDLE_COLOR), 1))
        painter.setBrush(Qt.NoBrush)
        r = float(self.radius)
        rect = QRectF(handle.x - r, handle.y - r, 2 * r, 2 * r)
        # Qt angles are in 1/16th degree, counter-clockwise; negative span sweeps the lower half
        painter.drawArc(rect, 0, -180 * 16)

    def get_cursor(self, handle):
        return Qt.CrossCursor


def anchor_cross_lines(x, y, size=ANCHOR_CROSS_SIZE):
    """Segments of the anchor cross centered on (x, y).

    Returns:
        [((x1, y1), (x2, y2)), ...]: Horizontal arm, then vertical arm
    """
    return [
        ((x - size, y), (x + size, y)),
        ((x, y - size), (x, y + size)),
    ]


def draw_anchor_cross(painter, x, y, size=ANCHOR_CROSS_SIZE):
    """Draw the magenta cross marking the point held fixed during a drag."""
    painter.setPen(QPen(QColor(*ANCHOR_COLOR), ANCHOR_LINE_WIDTH))
    for (x1, y1), (x2, y2) in anchor_cross_lines(x, y, size):
        painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
