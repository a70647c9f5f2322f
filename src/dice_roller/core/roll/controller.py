from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

from ..anim import AnimationProfile, RotationAnimator
from ..geometry import FaceGeometryResolver, PlacedFace, VisibleFaceTracker, wrap_angles
from ..model import AnimationState, RollOutcome, Vector
from .selector import OutcomeSelector

_LOG = logging.getLogger(__name__)

CompletionListener = Callable[[int], None]
StartListener = Callable[[RollOutcome], None]


class RollPhase(str, Enum):
    IDLE = "idle"
    ROLLING = "rolling"


class DiceRollController:
    """Per-die roll state machine driven by an external ticker.

    Idle -> Rolling on ``request_roll`` (ignored while rolling). Rolling -> Idle
    on the first frame whose progress reaches 1.0; the outcome value is then
    committed and completion listeners run once, synchronously.
    """

    def __init__(
        self,
        selector: OutcomeSelector,
        profile: AnimationProfile,
        *,
        sides: int = 6,
        resolver: Optional[FaceGeometryResolver] = None,
        tracker: Optional[VisibleFaceTracker] = None,
        initial_value: int = 1,
    ) -> None:
        self._selector = selector
        self._sides = selector.check_sides(sides)
        self._profile = profile
        self._resolver = resolver
        self._tracker = tracker
        self._phase = RollPhase.IDLE
        self._outcome: RollOutcome | None = None
        self._animator: RotationAnimator | None = None
        self._state = AnimationState.at_rest(np.zeros(3, dtype=float))
        self._current_value = int(initial_value)
        self._completion_listeners: List[CompletionListener] = []
        self._start_listeners: List[StartListener] = []

    @property
    def phase(self) -> RollPhase:
        return self._phase

    @property
    def is_rolling(self) -> bool:
        return self._phase == RollPhase.ROLLING

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def profile(self) -> AnimationProfile:
        return self._profile

    @property
    def resolver(self) -> FaceGeometryResolver | None:
        return self._resolver

    @property
    def tracker(self) -> VisibleFaceTracker | None:
        return self._tracker

    @property
    def outcome(self) -> RollOutcome | None:
        return self._outcome

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def rotation(self) -> Vector:
        return self._state.rotation

    @property
    def bounce_offset(self) -> float:
        return self._state.bounce_offset

    @property
    def current_value(self) -> int:
        return self._current_value

    def add_completion_listener(self, listener: CompletionListener) -> None:
        self._completion_listeners.append(listener)

    def add_start_listener(self, listener: StartListener) -> None:
        self._start_listeners.append(listener)

    def request_roll(self) -> bool:
        if self._phase == RollPhase.ROLLING:
            _LOG.debug("Roll already in flight; request ignored")
            return False
        outcome = self._selector.select_outcome(self._sides)
        start = wrap_angles(self._state.rotation)
        self._animator = RotationAnimator(
            self._profile,
            outcome,
            start_rotation=start,
            on_complete=self._finish_roll,
        )
        self._outcome = outcome
        self._phase = RollPhase.ROLLING
        self._state = self._animator.state_at(0.0)
        _LOG.debug("Roll started: value=%d spins=%d", outcome.face_value, outcome.spins)
        for listener in list(self._start_listeners):
            listener(outcome)
        return True

    def advance(self, fraction: float) -> AnimationState:
        if self._phase != RollPhase.ROLLING or self._animator is None:
            return self._state
        animator = self._animator
        state = animator.advance(fraction)
        # A completion listener may already have started the next roll.
        if self._phase == RollPhase.ROLLING and self._animator is animator:
            self._state = state
        return self._state

    def tick(self, elapsed_ms: float) -> AnimationState:
        return self.advance(self._profile.fraction_for(elapsed_ms))

    def visible_order(self) -> List[PlacedFace]:
        if self._resolver is None:
            raise RuntimeError("This die has no face geometry")
        return self._resolver.compute_visible_order(self._state.rotation)

    def displayed_value(self) -> int:
        """Value to show this frame; a resting cube re-reads it from its geometry."""
        if self._tracker is None:
            return self._current_value
        return self._tracker.update(self._state.rotation, animating=self.is_rolling)

    def _finish_roll(self) -> None:
        outcome = self._outcome
        if outcome is None:
            return
        self._phase = RollPhase.IDLE
        self._state = AnimationState.at_rest(outcome.target_rotation)
        self._current_value = outcome.face_value
        if self._tracker is not None:
            shown = self._tracker.update(outcome.target_rotation, animating=False)
            if shown != outcome.face_value:
                _LOG.warning("Resting face shows %d but the roll selected %d", shown, outcome.face_value)
                self._tracker.reset(outcome.face_value)
        _LOG.debug("Roll complete: value=%d", outcome.face_value)
        for listener in list(self._completion_listeners):
            listener(outcome.face_value)
