from __future__ import annotations

import numpy as np

from ..anim import FLAT_DURATION_MS, curve_from_id, flat_profile
from ..roll import DiceRollController, FlatOutcomeSelector
from .base import VariantUIDefaults
from .registry import variant_registry


class FlatDieVariant:
    variant_id = "flat"
    name = "Flat Die (any side count)"

    def create_controller(self, definition, rng: np.random.Generator | None = None) -> DiceRollController:
        profile = flat_profile(
            duration_ms=definition.duration_ms or FLAT_DURATION_MS,
            rotation_curve=curve_from_id(definition.rotation_curve),
            bounce_curve=curve_from_id(definition.bounce_curve),
        )
        selector = FlatOutcomeSelector(rng=rng if rng is not None else np.random.default_rng())
        return DiceRollController(selector, profile, sides=definition.sides)

    def ui_defaults(self) -> VariantUIDefaults:
        return VariantUIDefaults(size=160.0, sides=6)


variant_registry.register(FlatDieVariant())
