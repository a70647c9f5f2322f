from __future__ import annotations

import logging
from typing import Iterable

from .resolver import FaceGeometryResolver

_LOG = logging.getLogger(__name__)

DEFAULT_VISIBILITY_THRESHOLD = 0.95


class VisibleFaceTracker:
    """Commits the value of the face currently showing on a resting die.

    A face is committed once its depth clears ``threshold`` times the face
    half-extent. Below the threshold a strict tracker keeps the previous value;
    otherwise the deepest face wins so an edge-on rest never reports a stale
    value. Nothing is committed while the die is animating.
    """

    def __init__(
        self,
        resolver: FaceGeometryResolver,
        threshold: float = DEFAULT_VISIBILITY_THRESHOLD,
        *,
        strict: bool = False,
        initial_value: int = 1,
    ) -> None:
        if not 0.0 < threshold <= 1.0:
            raise ValueError("threshold must be in (0, 1]")
        self._resolver = resolver
        self._threshold = float(threshold)
        self._strict = bool(strict)
        self._committed_value = int(initial_value)

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def committed_value(self) -> int:
        return self._committed_value

    def update(self, rotation: Iterable[float], *, animating: bool) -> int:
        if animating:
            return self._committed_value
        front = self._resolver.frontmost(rotation)
        if front.depth >= self._threshold * self._resolver.half_size:
            self._committed_value = front.value
        elif self._strict:
            _LOG.debug(
                "Face %s below visibility threshold (%.3f); keeping %d",
                front.name.value,
                front.depth,
                self._committed_value,
            )
        else:
            _LOG.debug(
                "Face %s below visibility threshold (%.3f); committing deepest face",
                front.name.value,
                front.depth,
            )
            self._committed_value = front.value
        return self._committed_value

    def reset(self, value: int) -> None:
        self._committed_value = int(value)
