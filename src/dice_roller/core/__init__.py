from .anim import AnimationProfile, RotationAnimator, cube_profile, flat_profile
from .geometry import FaceGeometryResolver, PlacedFace, VisibleFaceTracker, heuristic_visible_order
from .model import (
    STANDARD_FACES,
    AnimationState,
    FaceDescriptor,
    FaceName,
    RollOutcome,
    Vector,
)
from .roll import (
    CubeOutcomeSelector,
    DiceRollController,
    FlatOutcomeSelector,
    OutcomeSelector,
    RollPhase,
)
from .roller_definition import RollerDefinition, controller_from_definition

__all__ = [
    "AnimationProfile",
    "AnimationState",
    "CubeOutcomeSelector",
    "DiceRollController",
    "FaceDescriptor",
    "FaceGeometryResolver",
    "FaceName",
    "FlatOutcomeSelector",
    "OutcomeSelector",
    "PlacedFace",
    "RollOutcome",
    "RollPhase",
    "RollerDefinition",
    "RotationAnimator",
    "STANDARD_FACES",
    "Vector",
    "VisibleFaceTracker",
    "controller_from_definition",
    "cube_profile",
    "flat_profile",
    "heuristic_visible_order",
]
