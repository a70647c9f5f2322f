from __future__ import annotations

from typing import Iterable

import numpy as np

from ..model import Vector
from ..model.faces import _to_vector

TWO_PI = 2.0 * np.pi


def axis_rotation(axis: int, angle: float) -> np.ndarray:
    c = float(np.cos(angle))
    s = float(np.sin(angle))
    if axis == 0:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]], dtype=float)
    if axis == 1:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=float)
    if axis == 2:
        return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=float)
    raise ValueError(f"Unsupported axis: {axis}")


def rotation_matrix(rotation: Iterable[float]) -> np.ndarray:
    """Matrix taking die-frame points to view-frame points.

    ``rotation`` holds (x, y, z) angles in radians. The angles turn the viewing
    frame about the die, so die points move by the inverse turn; X is applied
    outermost, then Y, then Z.
    """
    x, y, z = _to_vector(rotation, length=3)
    return axis_rotation(0, -x) @ axis_rotation(1, -y) @ axis_rotation(2, -z)


def wrap_angles(rotation: Iterable[float]) -> Vector:
    """Wrap each angle into (-pi, pi]; the orientation is unchanged."""
    angles = _to_vector(rotation, length=3)
    return np.pi - np.mod(np.pi - angles, TWO_PI)


def project_points(points: np.ndarray, perspective: float = 0.0) -> np.ndarray:
    """Project view-frame points onto the screen plane.

    ``perspective`` is the inverse camera distance in die units; zero gives an
    orthographic projection. Points nearer the viewer (larger z) grow.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("Points must be a Nx3 array")
    if perspective < 0.0:
        raise ValueError("perspective must be non-negative")
    denom = 1.0 - perspective * pts[:, 2]
    if np.any(denom <= 0.0):
        raise ValueError("Points lie behind the camera")
    return pts[:, :2] / denom[:, None]
