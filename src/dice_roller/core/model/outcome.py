from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .faces import Vector, _frozen_vector


@dataclass(frozen=True, eq=False)
class RollOutcome:
    face_value: int
    target_rotation: Vector
    base_rotation: Vector = field(default_factory=lambda: np.zeros(3, dtype=float))
    spins: int = 0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if self.face_value < 1:
            raise ValueError("face_value must be >= 1")
        object.__setattr__(self, "target_rotation", _frozen_vector(self.target_rotation, length=3))
        object.__setattr__(self, "base_rotation", _frozen_vector(self.base_rotation, length=3))


@dataclass(frozen=True, eq=False)
class AnimationState:
    elapsed_fraction: float
    rotation: Vector
    bounce_offset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", _frozen_vector(self.rotation, length=3))

    @property
    def settled(self) -> bool:
        return self.elapsed_fraction >= 1.0

    @classmethod
    def at_rest(cls, rotation: Vector) -> "AnimationState":
        return cls(elapsed_fraction=1.0, rotation=rotation, bounce_offset=0.0)
