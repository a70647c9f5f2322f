from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .easing import _check_fraction

DEFAULT_BOUNCE_WEIGHTS: Tuple[Tuple[float, float], ...] = ((10.0, 15.0), (10.0, 15.0), (5.0, 10.0))


@dataclass(frozen=True)
class BounceSegment:
    begin: float
    end: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("Segment weight must be positive")


@dataclass(frozen=True)
class BounceSequence:
    """Weighted piecewise-linear offset track; each segment gets its share of [0, 1]."""

    segments: Tuple[BounceSegment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("BounceSequence needs at least one segment")
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def total_weight(self) -> float:
        return float(sum(segment.weight for segment in self.segments))

    def transform(self, t: float) -> float:
        target = _check_fraction(t) * self.total_weight
        start = 0.0
        last_index = len(self.segments) - 1
        for index, segment in enumerate(self.segments):
            stop = start + segment.weight
            if target < stop or index == last_index:
                local = (target - start) / segment.weight
                if local >= 1.0:
                    return segment.end
                if local <= 0.0:
                    return segment.begin
                return segment.begin + (segment.end - segment.begin) * local
            start = stop
        return self.segments[-1].end


def damped_bounce(
    heights: Sequence[float],
    weights: Sequence[Tuple[float, float]] = DEFAULT_BOUNCE_WEIGHTS,
) -> BounceSequence:
    """Up-and-down hops of decreasing height; negative offsets lift the die on screen."""
    if len(heights) != len(weights):
        raise ValueError("Each bounce height needs a (rise, fall) weight pair")
    segments = []
    for height, (rise, fall) in zip(heights, weights):
        peak = -abs(float(height))
        segments.append(BounceSegment(0.0, peak, float(rise)))
        segments.append(BounceSegment(peak, 0.0, float(fall)))
    return BounceSequence(tuple(segments))
