"""
Qt implementations of the measurement and drawing capabilities.
"""
from typing import Dict

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPen

from pin_input.core.decoration import TextStyle
from pin_input.core.draw_commands import Paint, PaintStyle
from pin_input.core.geometry import Offset, Rect, Size


def to_qcolor(color: str) -> QColor:
    # QColor reads #AARRGGBB, the same order as our hex strings
    return QColor(color)


def to_qfont(style: TextStyle) -> QFont:
    font = QFont()
    if style.font_family:
        font.setFamily(style.font_family)
    # Font sizes are logical pixels
    font.setPixelSize(max(1, round(style.font_size)))
    font.setBold(style.bold)
    return font


class QtTextMeasurer:
    """TextMeasurer backed by QFontMetricsF."""

    def __init__(self):
        self._metrics: Dict[TextStyle, QFontMetricsF] = {}

    def _metrics_for(self, style: TextStyle) -> QFontMetricsF:
        metrics = self._metrics.get(style)
        if metrics is None:
            metrics = QFontMetricsF(to_qfont(style))
            self._metrics[style] = metrics
        return metrics

    def measure(self, text: str, style: TextStyle) -> Size:
        metrics = self._metrics_for(style)
        return Size(metrics.horizontalAdvance(text), metrics.height())


class QPainterSurface:
    """DrawSurface drawing through an active QPainter."""

    def __init__(self, painter: QPainter):
        self._painter = painter
        self._fonts: Dict[TextStyle, QFont] = {}
        self.draw_calls = 0

    def _apply_paint(self, paint: Paint) -> None:
        color = to_qcolor(paint.color)
        if paint.style is PaintStyle.FILL:
            self._painter.setPen(Qt.PenStyle.NoPen)
            self._painter.setBrush(color)
        else:
            pen = QPen(color)
            pen.setWidthF(paint.stroke_width)
            self._painter.setPen(pen)
            self._painter.setBrush(Qt.BrushStyle.NoBrush)

    def draw_rrect(self, rect: Rect, radius: float, paint: Paint) -> None:
        self.draw_calls += 1
        self._apply_paint(paint)
        qrect = QRectF(rect.left, rect.top, rect.width, rect.height)
        if radius > 0:
            self._painter.drawRoundedRect(qrect, radius, radius)
        else:
            self._painter.drawRect(qrect)

    def draw_line(self, start: Offset, end: Offset, paint: Paint) -> None:
        self.draw_calls += 1
        self._apply_paint(paint)
        self._painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))

    def draw_glyph(self, text: str, origin: Offset, size: Size, style: TextStyle) -> None:
        self.draw_calls += 1
        font = self._fonts.get(style)
        if font is None:
            font = self._fonts[style] = to_qfont(style)
        self._painter.setFont(font)
        self._painter.setPen(to_qcolor(style.color))
        # Origin is the top-left of the measured box, not the baseline
        box = QRectF(origin.x, origin.y, size.width, size.height)
        self._painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)

