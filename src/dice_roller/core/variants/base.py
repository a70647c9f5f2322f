from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

from ..roll import DiceRollController

if TYPE_CHECKING:
    from ..roller_definition import RollerDefinition


@dataclass(frozen=True)
class VariantUIDefaults:
    size: float = 200.0
    sides: int = 6


class DieVariant(Protocol):
    variant_id: str
    name: str

    def create_controller(
        self, definition: "RollerDefinition", rng: np.random.Generator | None = None
    ) -> DiceRollController:
        ...

    def ui_defaults(self) -> VariantUIDefaults | None:
        ...
