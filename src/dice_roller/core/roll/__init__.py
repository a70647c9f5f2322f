from .controller import CompletionListener, DiceRollController, RollPhase, StartListener
from .selector import (
    CUBE_SIDES,
    FACE_ROTATIONS,
    MAX_JITTER,
    CubeOutcomeSelector,
    FlatOutcomeSelector,
    OutcomeSelector,
)

__all__ = [
    "CUBE_SIDES",
    "CompletionListener",
    "CubeOutcomeSelector",
    "DiceRollController",
    "FACE_ROTATIONS",
    "FlatOutcomeSelector",
    "MAX_JITTER",
    "OutcomeSelector",
    "RollPhase",
    "StartListener",
]
