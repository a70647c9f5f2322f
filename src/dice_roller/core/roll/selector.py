from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Protocol, Tuple

import numpy as np

from ..geometry import TWO_PI
from ..model import RollOutcome

CUBE_SIDES = 6
MIN_EXTRA_SPINS = 2
MAX_EXTRA_SPINS = 4
MAX_JITTER = np.pi / 8.0
MIN_FLAT_TURNS = 1
MAX_FLAT_TURNS = 5

Rotation = Tuple[float, float, float]

# Base (x, y, z) rotations that bring each value's face to the front.
FACE_ROTATIONS: Dict[int, Tuple[Rotation, ...]] = {
    1: ((0.0, 0.0, 0.0), (TWO_PI, 0.0, 0.0), (0.0, TWO_PI, 0.0), (0.0, 0.0, TWO_PI)),
    2: ((np.pi / 2, 0.0, 0.0), (-3 * np.pi / 2, 0.0, 0.0)),
    3: ((0.0, np.pi / 2, 0.0), (0.0, -3 * np.pi / 2, 0.0)),
    4: ((0.0, -np.pi / 2, 0.0), (0.0, 3 * np.pi / 2, 0.0)),
    5: ((-np.pi / 2, 0.0, 0.0), (3 * np.pi / 2, 0.0, 0.0)),
    6: ((np.pi, 0.0, 0.0), (-np.pi, 0.0, 0.0), (0.0, np.pi, 0.0), (0.0, np.pi, np.pi)),
}


class OutcomeSelector(Protocol):
    def check_sides(self, sides: int) -> int:
        ...

    def select_outcome(self, sides: int) -> RollOutcome:
        ...


def _default_rng() -> np.random.Generator:
    return np.random.default_rng()


@dataclass
class FlatOutcomeSelector:
    """Uniform value in [1, sides]; the tumble target is decorative only."""

    rng: np.random.Generator = field(default_factory=_default_rng)

    def check_sides(self, sides: int) -> int:
        if int(sides) != sides or sides < 1:
            raise ValueError("sides must be an integer >= 1")
        return int(sides)

    def select_value(self, sides: int) -> int:
        count = self.check_sides(sides)
        return int(self.rng.integers(1, count + 1))

    def select_outcome(self, sides: int) -> RollOutcome:
        value = self.select_value(sides)
        turns = self.rng.integers(MIN_FLAT_TURNS, MAX_FLAT_TURNS + 1, size=3)
        target = TWO_PI * turns.astype(float)
        jitter = float(self.rng.random()) * MAX_JITTER
        return RollOutcome(
            face_value=value,
            target_rotation=target,
            base_rotation=np.zeros(3, dtype=float),
            spins=int(turns.max()),
            jitter=jitter,
        )


@dataclass
class CubeOutcomeSelector:
    """Uniform value in [1, 6] plus a spin target whose rest pose shows that value."""

    rng: np.random.Generator = field(default_factory=_default_rng)
    face_rotations: Dict[int, Tuple[Rotation, ...]] = field(default_factory=lambda: dict(FACE_ROTATIONS))

    def check_sides(self, sides: int) -> int:
        if sides != CUBE_SIDES:
            raise ValueError("Cube dice have exactly 6 sides")
        return CUBE_SIDES

    def select_outcome(self, sides: int = CUBE_SIDES) -> RollOutcome:
        self.check_sides(sides)
        value = int(self.rng.integers(1, CUBE_SIDES + 1))
        options = self.face_rotations[value]
        base = np.array(options[int(self.rng.integers(0, len(options)))], dtype=float)
        spins = int(self.rng.integers(MIN_EXTRA_SPINS, MAX_EXTRA_SPINS + 1))
        jitter = float(self.rng.random()) * MAX_JITTER
        return RollOutcome(
            face_value=value,
            target_rotation=base + TWO_PI * spins,
            base_rotation=base,
            spins=spins,
            jitter=jitter,
        )
