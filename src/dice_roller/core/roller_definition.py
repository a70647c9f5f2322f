from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .anim import curve_from_id
from .geometry import DEFAULT_VISIBILITY_THRESHOLD
from .roll import DiceRollController

ROLLER_SCHEMA_VERSION = 1


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


@dataclass
class RollerDefinition:
    variant: str = "cube"
    sides: int = 6
    duration_ms: int | None = None
    rotation_curve: str = "ease_out_quad"
    bounce_curve: str = "ease_in_out"
    visibility_threshold: float = DEFAULT_VISIBILITY_THRESHOLD
    strict_visibility: bool = False
    size: float = 200.0
    play_sound: bool = True
    sound_path: str | None = None
    use_custom_faces: bool = False
    face_image_dir: str | None = None
    schema_version: int = ROLLER_SCHEMA_VERSION

    def validate(self) -> None:
        from .variants import load_builtin_variants, variant_registry

        for name in ("variant", "rotation_curve", "bounce_curve"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        load_builtin_variants()
        variant_registry.get(self.variant)
        if not _is_integer(self.sides) or self.sides < 1:
            raise ValueError("sides must be an integer >= 1")
        if self.duration_ms is not None and (not _is_integer(self.duration_ms) or self.duration_ms <= 0):
            raise ValueError("duration_ms must be a positive integer")
        if not _is_number(self.visibility_threshold) or not 0.0 < self.visibility_threshold <= 1.0:
            raise ValueError("visibility_threshold must be in (0, 1]")
        if not _is_number(self.size) or self.size <= 0:
            raise ValueError("size must be positive")
        for name in ("strict_visibility", "play_sound", "use_custom_faces"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        curve_from_id(self.rotation_curve)
        curve_from_id(self.bounce_curve)


def controller_from_definition(
    defn: RollerDefinition, rng: np.random.Generator | None = None
) -> DiceRollController:
    from .variants import variant_registry

    defn.validate()
    variant = variant_registry.get(defn.variant)
    return variant.create_controller(defn, rng=rng)
