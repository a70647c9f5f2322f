from __future__ import annotations

from typing import Sequence

import numpy as np
from PySide6 import QtCore, QtGui, QtWidgets

from ...core.geometry import project_points, rotation_matrix
from ...core.model import STANDARD_FACES, FaceName, RollOutcome, face_by_name
from ...core.roll import DiceRollController
from ..assets import RollSound
from ..rendering import FacePainter

FRAME_INTERVAL_MS = 16
FACE_SCALE = 0.95
BOUNCE_REFERENCE_SIZE = 200.0
BOUNCE_HEADROOM = 50
MIN_SHADE = 0.55


class DiceView(QtWidgets.QWidget):
    """Hosts one die: drives its controller from a frame timer and paints it.

    Cube faces are painted back-to-front in the order the controller's resolver
    returns, so nearer faces cover farther ones.
    """

    roll_started = QtCore.Signal()
    roll_completed = QtCore.Signal(int)
    value_changed = QtCore.Signal(int)

    def __init__(
        self,
        controller: DiceRollController,
        *,
        size: float = 200.0,
        face_images: Sequence[QtGui.QImage | None] | None = None,
        sound: RollSound | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._size = float(size)
        self._sound = sound
        self._face_painter = FacePainter(images=face_images)
        self._flicker_rng = np.random.default_rng()
        self._front_face = face_by_name(FaceName.FRONT, STANDARD_FACES)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._on_tick)
        self._clock = QtCore.QElapsedTimer()

        controller.add_start_listener(self._on_roll_started)
        controller.add_completion_listener(self._on_roll_completed)
        self._shown_value = controller.displayed_value()

        side = int(self._size)
        self.setMinimumSize(side, side + BOUNCE_HEADROOM)
        self.setCursor(QtCore.Qt.PointingHandCursor)

    @property
    def controller(self) -> DiceRollController:
        return self._controller

    @property
    def shown_value(self) -> int:
        return self._shown_value

    def roll(self) -> bool:
        if not self._controller.request_roll():
            return False
        self._clock.start()
        self._timer.start(FRAME_INTERVAL_MS)
        self.update()
        return True

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() == QtCore.Qt.LeftButton:
            self.roll()
            event.accept()
            return
        super().mousePressEvent(event)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        _ = event
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        if self._controller.resolver is None:
            self._paint_flat(painter)
        else:
            self._paint_cube(painter)
        painter.end()

    def _on_tick(self) -> None:
        self._controller.tick(self._clock.elapsed())
        if not self._controller.is_rolling:
            self._timer.stop()
        self._refresh_value()
        self.update()

    def _refresh_value(self) -> None:
        value = self._controller.displayed_value()
        if value != self._shown_value:
            self._shown_value = value
            self.value_changed.emit(value)

    def _on_roll_started(self, outcome: RollOutcome) -> None:
        _ = outcome
        if self._sound is not None:
            self._sound.play()
        self.roll_started.emit()

    def _on_roll_completed(self, value: int) -> None:
        self.roll_completed.emit(value)

    def _screen_origin(self) -> np.ndarray:
        bounce = self._controller.bounce_offset * self._size / BOUNCE_REFERENCE_SIZE
        return np.array([self.width() / 2.0, self.height() / 2.0 + bounce], dtype=float)

    def _paint_cube(self, painter: QtGui.QPainter) -> None:
        half_px = self._size * FACE_SCALE / 2.0
        origin = self._screen_origin()
        half_size = self._controller.resolver.half_size
        for placed in self._controller.visible_order():
            corners = project_points(placed.corners) * (half_px / half_size) + origin
            shade = MIN_SHADE + (1.0 - MIN_SHADE) * max(placed.depth / half_size, 0.0)
            self._face_painter.paint_face(painter, corners, placed.value, shade)

    def _paint_flat(self, painter: QtGui.QPainter) -> None:
        half_px = self._size / 2.0
        matrix = rotation_matrix(self._controller.rotation)
        corners3d = self._front_face.corners() @ matrix.T
        corners = project_points(corners3d) * half_px + self._screen_origin()
        if self._controller.is_rolling:
            value = int(self._flicker_rng.integers(1, self._controller.sides + 1))
        else:
            value = self._shown_value
        if self._controller.sides > 6:
            self._face_painter.paint_disc(painter, corners, value)
        else:
            self._face_painter.paint_face(painter, corners, value)
