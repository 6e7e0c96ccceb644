"""Canvas rendering mixin: replays render primitives with a QPainter.

Programs produce backend-free primitives (models.drawing); this mixin is
the only place that turns them into Qt paint calls.
"""

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPainterPath, QPen, QPolygonF

from models.color import Color
from models.drawing import (
    FillRectangle, FillCircle, FillPath, StrokeLine, StrokePath, LinearGradient,
)


def to_qcolor(color):
    """models.color.Color -> QColor"""
    return QColor.fromRgbF(color.r, color.g, color.b, color.a)


def to_qbrush(style):
    """Solid Color or LinearGradient -> QBrush"""
    if isinstance(style, LinearGradient):
        gradient = QLinearGradient(QPointF(style.start.x, style.start.y),
                                   QPointF(style.end.x, style.end.y))
        for offset, color in style.stops:
            gradient.setColorAt(offset, to_qcolor(color))
        return QBrush(gradient)
    if isinstance(style, Color):
        return QBrush(to_qcolor(style))
    raise TypeError(f"Unsupported style: {style!r}")


def to_qpolygon(points):
    return QPolygonF([QPointF(p.x, p.y) for p in points])


class CanvasRenderingMixin:
    """Mixin providing primitive painting for the canvas widget."""

    # ========================================
    # Primitive Painting
    # ========================================

    def _paint_primitives(self, painter, primitives):
        """Paint primitives back to front."""
        painter.setRenderHint(QPainter.Antialiasing, True)
        for primitive in primitives:
            self._paint_primitive(painter, primitive)

    def _paint_primitive(self, painter, primitive):
        if isinstance(primitive, FillRectangle):
            painter.setPen(Qt.NoPen)
            painter.setBrush(to_qbrush(primitive.style))
            painter.drawRect(QRectF(primitive.top_left.x, primitive.top_left.y,
                                    primitive.width, primitive.height))
        elif isinstance(primitive, FillCircle):
            painter.setPen(Qt.NoPen)
            painter.setBrush(to_qbrush(primitive.style))
            painter.drawEllipse(QPointF(primitive.center.x, primitive.center.y),
                                primitive.radius, primitive.radius)
        elif isinstance(primitive, FillPath):
            painter.setPen(Qt.NoPen)
            painter.setBrush(to_qbrush(primitive.style))
            painter.drawPolygon(to_qpolygon(primitive.points))
        elif isinstance(primitive, StrokeLine):
            # Flat caps: a thick stroke ends exactly at its endpoints
            pen = QPen(to_qbrush(primitive.style), primitive.width, Qt.SolidLine, Qt.FlatCap)
            painter.setPen(pen)
            painter.setBrush(Qt.NoBrush)
            painter.drawLine(QPointF(primitive.start.x, primitive.start.y),
                             QPointF(primitive.end.x, primitive.end.y))
        elif isinstance(primitive, StrokePath):
            pen = QPen(to_qbrush(primitive.style), primitive.width, Qt.SolidLine, Qt.FlatCap,
                       Qt.MiterJoin)
            painter.setPen(pen)
            painter.setBrush(Qt.NoBrush)
            path = QPainterPath()
            path.addPolygon(to_qpolygon(primitive.points))
            if primitive.closed:
                path.closeSubpath()
            painter.drawPath(path)
        else:
            raise TypeError(f"Unsupported primitive: {primitive!r}")
