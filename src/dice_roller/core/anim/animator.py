from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from ..model import AnimationState, RollOutcome, Vector
from ..model.faces import _to_vector
from .bounce import BounceSequence, damped_bounce
from .easing import EASE_IN_OUT, EASE_OUT_QUAD, Curve, Interval

CUBE_DURATION_MS = 4000
FLAT_DURATION_MS = 2000
CUBE_BOUNCE_HEIGHTS = (40.0, 20.0, 5.0)
FLAT_BOUNCE_HEIGHTS = (30.0, 10.0, 5.0)
BOUNCE_WINDOW = (0.6, 1.0)


@dataclass(frozen=True)
class AnimationProfile:
    duration_ms: int
    rotation: Interval
    bounce_window: Interval
    bounce: BounceSequence

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")

    def fraction_for(self, elapsed_ms: float) -> float:
        if elapsed_ms < 0:
            raise ValueError("elapsed_ms must be non-negative")
        return min(float(elapsed_ms) / float(self.duration_ms), 1.0)


def cube_profile(
    duration_ms: int = CUBE_DURATION_MS,
    rotation_curve: Curve = EASE_OUT_QUAD,
    bounce_curve: Curve = EASE_IN_OUT,
) -> AnimationProfile:
    return AnimationProfile(
        duration_ms=int(duration_ms),
        rotation=Interval(0.0, 0.7, rotation_curve),
        bounce_window=Interval(BOUNCE_WINDOW[0], BOUNCE_WINDOW[1], bounce_curve),
        bounce=damped_bounce(CUBE_BOUNCE_HEIGHTS),
    )


def flat_profile(
    duration_ms: int = FLAT_DURATION_MS,
    rotation_curve: Curve = EASE_OUT_QUAD,
    bounce_curve: Curve = EASE_IN_OUT,
) -> AnimationProfile:
    return AnimationProfile(
        duration_ms=int(duration_ms),
        rotation=Interval(0.0, 0.8, rotation_curve),
        bounce_window=Interval(BOUNCE_WINDOW[0], BOUNCE_WINDOW[1], bounce_curve),
        bounce=damped_bounce(FLAT_BOUNCE_HEIGHTS),
    )


class RotationAnimator:
    """Rotation and bounce of one roll as a function of elapsed progress.

    ``state_at`` is pure. ``advance`` is the per-frame entry point: it requires
    non-decreasing progress, clamps past 1.0 and fires ``on_complete`` exactly
    once, on the first frame that reaches 1.0. The outcome's jitter bends the
    spin path and vanishes at the end, so the die lands on the exact target.
    """

    def __init__(
        self,
        profile: AnimationProfile,
        outcome: RollOutcome,
        start_rotation: Optional[Iterable[float]] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        self._profile = profile
        self._outcome = outcome
        if start_rotation is None:
            self._start = np.zeros(3, dtype=float)
        else:
            self._start = _to_vector(start_rotation, length=3)
        self._target = np.array(outcome.target_rotation, dtype=float)
        self._delta = self._target - self._start
        self._on_complete = on_complete
        self._last_fraction = 0.0
        self._completed = False

    @property
    def profile(self) -> AnimationProfile:
        return self._profile

    @property
    def outcome(self) -> RollOutcome:
        return self._outcome

    @property
    def start_rotation(self) -> Vector:
        return self._start.copy()

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def last_fraction(self) -> float:
        return self._last_fraction

    def rotation_at(self, fraction: float) -> Vector:
        progress = self._profile.rotation.transform(fraction)
        if progress >= 1.0:
            return self._target.copy()
        wobble = self._outcome.jitter * math.sin(math.pi * progress)
        return self._start + self._delta * progress + wobble

    def bounce_at(self, fraction: float) -> float:
        progress = self._profile.bounce_window.transform(fraction)
        return float(self._profile.bounce.transform(progress))

    def state_at(self, fraction: float) -> AnimationState:
        value = _check_progress(fraction)
        return AnimationState(
            elapsed_fraction=value,
            rotation=self.rotation_at(value),
            bounce_offset=self.bounce_at(value),
        )

    def advance(self, fraction: float) -> AnimationState:
        value = _check_progress(fraction)
        if value < self._last_fraction:
            raise ValueError("elapsed fraction must not decrease")
        self._last_fraction = value
        state = self.state_at(value)
        if value >= 1.0 and not self._completed:
            self._completed = True
            if self._on_complete is not None:
                self._on_complete()
        return state


def _check_progress(fraction: float) -> float:
    value = float(fraction)
    if math.isnan(value) or value < 0.0:
        raise ValueError("elapsed fraction must be a non-negative number")
    return min(value, 1.0)
