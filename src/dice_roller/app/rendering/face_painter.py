from __future__ import annotations

from typing import Sequence

import numpy as np
from PySide6 import QtCore, QtGui

from ...core.model import pip_centers

PIP_RADIUS = 0.075
CORNER_RADIUS = 0.1
_MIN_AREA = 1e-3


def _affine_for_quad(corners: np.ndarray) -> QtGui.QTransform | None:
    """Transform mapping the unit square onto a projected face.

    ``corners`` is a 4x2 array ordered top-left, top-right, bottom-right,
    bottom-left. Orthographic projection keeps faces parallelograms, so three
    corners fix the map.
    """
    origin = corners[0]
    u = corners[1] - origin
    v = corners[3] - origin
    if abs(float(u[0] * v[1] - u[1] * v[0])) < _MIN_AREA:
        return None
    return QtGui.QTransform(float(u[0]), float(u[1]), float(v[0]), float(v[1]), float(origin[0]), float(origin[1]))


class FacePainter:
    def __init__(
        self,
        die_color: QtGui.QColor | None = None,
        pip_color: QtGui.QColor | None = None,
        images: Sequence[QtGui.QImage | None] | None = None,
    ) -> None:
        self._die_color = die_color or QtGui.QColor("white")
        self._pip_color = pip_color or QtGui.QColor("black")
        self._images = list(images) if images else []
        self._edge_pen = QtGui.QPen(QtGui.QColor(0, 0, 0, 66), 1.0)
        self._edge_pen.setCosmetic(True)

    def image_for(self, value: int) -> QtGui.QImage | None:
        index = value - 1
        if 0 <= index < len(self._images):
            return self._images[index]
        return None

    def paint_face(self, painter: QtGui.QPainter, corners: np.ndarray, value: int, shade: float = 1.0) -> None:
        transform = _affine_for_quad(corners)
        if transform is None:
            return
        painter.save()
        painter.setTransform(transform, True)
        painter.setPen(self._edge_pen)
        painter.setBrush(self._shaded(self._die_color, shade))
        painter.drawRoundedRect(QtCore.QRectF(0.0, 0.0, 1.0, 1.0), CORNER_RADIUS, CORNER_RADIUS)
        image = self.image_for(value)
        if image is not None:
            painter.drawImage(QtCore.QRectF(0.0, 0.0, 1.0, 1.0), image)
        else:
            self._paint_marks(painter, value, shade)
        painter.restore()

    def paint_disc(self, painter: QtGui.QPainter, corners: np.ndarray, value: int, shade: float = 1.0) -> None:
        transform = _affine_for_quad(corners)
        if transform is None:
            return
        painter.save()
        painter.setTransform(transform, True)
        painter.setPen(self._edge_pen)
        painter.setBrush(self._shaded(self._die_color, shade))
        painter.drawEllipse(QtCore.QRectF(0.0, 0.0, 1.0, 1.0))
        self._paint_number(painter, value, shade)
        painter.restore()

    def _paint_marks(self, painter: QtGui.QPainter, value: int, shade: float) -> None:
        centers = pip_centers(value)
        if not centers:
            self._paint_number(painter, value, shade)
            return
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(self._shaded(self._pip_color, shade))
        for x, y in centers:
            painter.drawEllipse(QtCore.QPointF(x, y), PIP_RADIUS, PIP_RADIUS)

    def _paint_number(self, painter: QtGui.QPainter, value: int, shade: float) -> None:
        # Font sizes are integral pixels, so lay the text out on a 100x100 grid.
        painter.save()
        painter.scale(0.01, 0.01)
        font = painter.font()
        font.setPixelSize(40)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(self._shaded(self._pip_color, shade))
        painter.drawText(QtCore.QRectF(0.0, 0.0, 100.0, 100.0), QtCore.Qt.AlignCenter, str(value))
        painter.restore()

    @staticmethod
    def _shaded(color: QtGui.QColor, shade: float) -> QtGui.QColor:
        factor = min(max(float(shade), 0.0), 1.0)
        return QtGui.QColor.fromRgbF(color.redF() * factor, color.greenF() * factor, color.blueF() * factor, color.alphaF())
