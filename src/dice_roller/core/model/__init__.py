from .faces import (
    OPPOSITE_FACES,
    PIP_LAYOUTS,
    STANDARD_FACES,
    FaceDescriptor,
    FaceName,
    Vector,
    face_by_name,
    face_by_value,
    opposite_face,
    pip_centers,
)
from .outcome import AnimationState, RollOutcome

__all__ = [
    "AnimationState",
    "FaceDescriptor",
    "FaceName",
    "OPPOSITE_FACES",
    "PIP_LAYOUTS",
    "RollOutcome",
    "STANDARD_FACES",
    "Vector",
    "face_by_name",
    "face_by_value",
    "opposite_face",
    "pip_centers",
]
