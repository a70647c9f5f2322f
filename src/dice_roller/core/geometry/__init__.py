from .resolver import FaceGeometryResolver, PlacedFace, heuristic_visible_order
from .transforms import TWO_PI, axis_rotation, project_points, rotation_matrix, wrap_angles
from .visibility import DEFAULT_VISIBILITY_THRESHOLD, VisibleFaceTracker

__all__ = [
    "DEFAULT_VISIBILITY_THRESHOLD",
    "FaceGeometryResolver",
    "PlacedFace",
    "TWO_PI",
    "VisibleFaceTracker",
    "axis_rotation",
    "heuristic_visible_order",
    "project_points",
    "rotation_matrix",
    "wrap_angles",
]
