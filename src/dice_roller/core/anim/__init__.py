from .animator import (
    CUBE_DURATION_MS,
    FLAT_DURATION_MS,
    AnimationProfile,
    RotationAnimator,
    cube_profile,
    flat_profile,
)
from .bounce import BounceSegment, BounceSequence, damped_bounce
from .easing import (
    CURVE_IDS,
    EASE_IN_OUT,
    EASE_IN_QUAD,
    EASE_OUT_CUBIC,
    EASE_OUT_QUAD,
    LINEAR,
    Cubic,
    Curve,
    Interval,
    Linear,
    curve_from_id,
    curve_id_from_instance,
)

__all__ = [
    "AnimationProfile",
    "BounceSegment",
    "BounceSequence",
    "CUBE_DURATION_MS",
    "CURVE_IDS",
    "Cubic",
    "Curve",
    "EASE_IN_OUT",
    "EASE_IN_QUAD",
    "EASE_OUT_CUBIC",
    "EASE_OUT_QUAD",
    "FLAT_DURATION_MS",
    "Interval",
    "LINEAR",
    "Linear",
    "RotationAnimator",
    "cube_profile",
    "curve_from_id",
    "curve_id_from_instance",
    "damped_bounce",
    "flat_profile",
]
