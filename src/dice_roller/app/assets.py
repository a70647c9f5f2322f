from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import logging

from PySide6 import QtCore, QtGui

_LOG = logging.getLogger(__name__)
_SOUND_ERROR: Optional[str] = None
try:  # pragma: no cover - optional dependency
    from PySide6 import QtMultimedia  # type: ignore
except Exception as exc:  # pragma: no cover - optional dependency
    QtMultimedia = None  # type: ignore
    _SOUND_ERROR = str(exc)

FACE_IMAGE_PATTERN = "dice_face_{value}.png"


def sound_available() -> bool:
    return QtMultimedia is not None


def sound_error() -> str | None:
    if QtMultimedia is None:
        return _SOUND_ERROR or "Qt Multimedia is not available"
    return None


def load_face_images(directory: Path, count: int = 6) -> List[QtGui.QImage | None]:
    """Load ``dice_face_<n>.png`` for n in 1..count.

    Missing or unreadable images come back as ``None``; the painter draws pips
    for those faces.
    """
    images: List[QtGui.QImage | None] = []
    for value in range(1, count + 1):
        path = directory / FACE_IMAGE_PATTERN.format(value=value)
        image = QtGui.QImage(str(path))
        if image.isNull():
            _LOG.warning("Could not load face image %s; using pips", path)
            images.append(None)
            continue
        images.append(image)
    return images


class RollSound:
    """Roll sound effect; every failure leaves it silent rather than raising."""

    def __init__(self, path: Path | None, parent: QtCore.QObject | None = None) -> None:
        self._effect = None
        if path is None:
            return
        if not sound_available():
            _LOG.warning("Roll sound disabled: %s", sound_error())
            return
        if not path.exists():
            _LOG.warning("Roll sound %s not found", path)
            return
        effect = QtMultimedia.QSoundEffect(parent)
        effect.statusChanged.connect(self._on_status_changed)
        effect.setSource(QtCore.QUrl.fromLocalFile(str(path.resolve())))
        self._effect = effect

    @property
    def loaded(self) -> bool:
        if self._effect is None:
            return False
        return self._effect.status() == QtMultimedia.QSoundEffect.Status.Ready

    def play(self) -> None:
        if not self.loaded:
            return
        self._effect.stop()
        self._effect.play()

    def _on_status_changed(self) -> None:
        if self._effect is None:
            return
        if self._effect.status() == QtMultimedia.QSoundEffect.Status.Error:
            _LOG.warning("Roll sound %s failed to load", self._effect.source().toLocalFile())
