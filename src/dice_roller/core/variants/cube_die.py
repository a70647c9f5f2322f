from __future__ import annotations

import numpy as np

from ..anim import CUBE_DURATION_MS, cube_profile, curve_from_id
from ..geometry import FaceGeometryResolver, VisibleFaceTracker
from ..roll import CubeOutcomeSelector, DiceRollController
from .base import VariantUIDefaults
from .registry import variant_registry


class CubeDieVariant:
    variant_id = "cube"
    name = "3D Cube Die"

    def create_controller(self, definition, rng: np.random.Generator | None = None) -> DiceRollController:
        profile = cube_profile(
            duration_ms=definition.duration_ms or CUBE_DURATION_MS,
            rotation_curve=curve_from_id(definition.rotation_curve),
            bounce_curve=curve_from_id(definition.bounce_curve),
        )
        selector = CubeOutcomeSelector(rng=rng if rng is not None else np.random.default_rng())
        resolver = FaceGeometryResolver()
        tracker = VisibleFaceTracker(
            resolver,
            threshold=definition.visibility_threshold,
            strict=definition.strict_visibility,
        )
        return DiceRollController(selector, profile, sides=definition.sides, resolver=resolver, tracker=tracker)

    def ui_defaults(self) -> VariantUIDefaults:
        return VariantUIDefaults(size=200.0, sides=6)


variant_registry.register(CubeDieVariant())
