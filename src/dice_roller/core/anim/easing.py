from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Protocol

_CUBIC_TOLERANCE = 1e-6
_MAX_BISECTION_STEPS = 64


class Curve(Protocol):
    def transform(self, t: float) -> float:
        ...


def _check_fraction(t: float) -> float:
    value = float(t)
    if math.isnan(value):
        raise ValueError("Curve input must be a number")
    return min(max(value, 0.0), 1.0)


def _evaluate_cubic(a: float, b: float, m: float) -> float:
    return 3.0 * a * (1.0 - m) * (1.0 - m) * m + 3.0 * b * (1.0 - m) * m * m + m * m * m


@dataclass(frozen=True)
class Linear:
    def transform(self, t: float) -> float:
        return _check_fraction(t)


@dataclass(frozen=True)
class Cubic:
    """Unit cubic Bezier through (0, 0), (a, b), (c, d) and (1, 1)."""

    a: float
    b: float
    c: float
    d: float

    def transform(self, t: float) -> float:
        t = _check_fraction(t)
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        start = 0.0
        end = 1.0
        midpoint = 0.5
        # Bisect on the x polynomial, then read y at the same parameter.
        for _ in range(_MAX_BISECTION_STEPS):
            midpoint = 0.5 * (start + end)
            estimate = _evaluate_cubic(self.a, self.c, midpoint)
            if abs(t - estimate) < _CUBIC_TOLERANCE:
                break
            if estimate < t:
                start = midpoint
            else:
                end = midpoint
        return _evaluate_cubic(self.b, self.d, midpoint)


@dataclass(frozen=True)
class Interval:
    """Runs ``curve`` over [begin, end] of the parent progress; flat elsewhere."""

    begin: float
    end: float
    curve: Curve = Linear()

    def __post_init__(self) -> None:
        if not 0.0 <= self.begin < self.end <= 1.0:
            raise ValueError("Interval bounds must satisfy 0 <= begin < end <= 1")

    def transform(self, t: float) -> float:
        t = _check_fraction(t)
        if t <= self.begin:
            return 0.0
        if t >= self.end:
            return 1.0
        return self.curve.transform((t - self.begin) / (self.end - self.begin))


LINEAR = Linear()
EASE_IN_QUAD = Cubic(0.55, 0.085, 0.68, 0.53)
EASE_OUT_QUAD = Cubic(0.25, 0.46, 0.45, 0.94)
EASE_OUT_CUBIC = Cubic(0.215, 0.61, 0.355, 1.0)
EASE_IN_OUT = Cubic(0.42, 0.0, 0.58, 1.0)

CURVE_IDS: Dict[str, Curve] = {
    "linear": LINEAR,
    "ease_in_quad": EASE_IN_QUAD,
    "ease_out_quad": EASE_OUT_QUAD,
    "ease_out_cubic": EASE_OUT_CUBIC,
    "ease_in_out": EASE_IN_OUT,
}


def curve_from_id(curve_id: str) -> Curve:
    curve = CURVE_IDS.get(curve_id)
    if curve is None:
        raise ValueError(f"Unknown curve id: {curve_id}")
    return curve


def curve_id_from_instance(curve: Curve) -> str:
    for key, known in CURVE_IDS.items():
        if known == curve:
            return key
    raise ValueError(f"Unsupported curve: {curve!r}")
