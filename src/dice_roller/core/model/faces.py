from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

import numpy as np

Vector = np.ndarray

PIP_GRID: Tuple[float, float, float] = (0.225, 0.5, 0.775)


def _to_vector(values: Iterable[float], *, length: int | None = None) -> Vector:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if length is not None and arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    return arr


def _frozen_vector(values: Iterable[float], *, length: int | None = None) -> Vector:
    arr = _to_vector(values, length=length)
    arr.setflags(write=False)
    return arr


class FaceName(str, Enum):
    FRONT = "front"
    BACK = "back"
    RIGHT = "right"
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True, eq=False)
class FaceDescriptor:
    """One face of a cube die, expressed in the die's own frame.

    The die frame uses screen conventions: +x right, +y down, +z toward the
    viewer. ``u_axis`` and ``v_axis`` span the face plane (face-right and
    face-down as seen from outside) with ``cross(u_axis, v_axis) == normal``.
    """

    name: FaceName
    value: int
    normal: Vector
    u_axis: Vector
    v_axis: Vector

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Face value must be positive")
        object.__setattr__(self, "normal", _frozen_vector(self.normal, length=3))
        object.__setattr__(self, "u_axis", _frozen_vector(self.u_axis, length=3))
        object.__setattr__(self, "v_axis", _frozen_vector(self.v_axis, length=3))

    def rest_position(self, half_size: float = 1.0) -> Vector:
        return self.normal * float(half_size)

    def corners(self, half_size: float = 1.0) -> np.ndarray:
        # Order: top-left, top-right, bottom-right, bottom-left in face coordinates.
        center = self.rest_position(half_size)
        u = self.u_axis * float(half_size)
        v = self.v_axis * float(half_size)
        return np.stack([center - u - v, center + u - v, center + u + v, center - u + v])


STANDARD_FACES: Tuple[FaceDescriptor, ...] = (
    FaceDescriptor(FaceName.FRONT, 1, normal=(0.0, 0.0, 1.0), u_axis=(1.0, 0.0, 0.0), v_axis=(0.0, 1.0, 0.0)),
    FaceDescriptor(FaceName.BACK, 6, normal=(0.0, 0.0, -1.0), u_axis=(-1.0, 0.0, 0.0), v_axis=(0.0, 1.0, 0.0)),
    FaceDescriptor(FaceName.RIGHT, 3, normal=(1.0, 0.0, 0.0), u_axis=(0.0, 0.0, -1.0), v_axis=(0.0, 1.0, 0.0)),
    FaceDescriptor(FaceName.LEFT, 4, normal=(-1.0, 0.0, 0.0), u_axis=(0.0, 0.0, 1.0), v_axis=(0.0, 1.0, 0.0)),
    FaceDescriptor(FaceName.TOP, 2, normal=(0.0, -1.0, 0.0), u_axis=(1.0, 0.0, 0.0), v_axis=(0.0, 0.0, 1.0)),
    FaceDescriptor(FaceName.BOTTOM, 5, normal=(0.0, 1.0, 0.0), u_axis=(1.0, 0.0, 0.0), v_axis=(0.0, 0.0, -1.0)),
)

OPPOSITE_FACES: Dict[FaceName, FaceName] = {
    FaceName.FRONT: FaceName.BACK,
    FaceName.BACK: FaceName.FRONT,
    FaceName.RIGHT: FaceName.LEFT,
    FaceName.LEFT: FaceName.RIGHT,
    FaceName.TOP: FaceName.BOTTOM,
    FaceName.BOTTOM: FaceName.TOP,
}

# 3x3 pip masks, row-major from the face's top-left corner.
PIP_LAYOUTS: Dict[int, Tuple[Tuple[int, int, int], ...]] = {
    1: ((0, 0, 0), (0, 1, 0), (0, 0, 0)),
    2: ((1, 0, 0), (0, 0, 0), (0, 0, 1)),
    3: ((1, 0, 0), (0, 1, 0), (0, 0, 1)),
    4: ((1, 0, 1), (0, 0, 0), (1, 0, 1)),
    5: ((1, 0, 1), (0, 1, 0), (1, 0, 1)),
    6: ((1, 0, 1), (1, 0, 1), (1, 0, 1)),
}


def face_by_name(name: FaceName | str, faces: Iterable[FaceDescriptor] = STANDARD_FACES) -> FaceDescriptor:
    key = FaceName(name)
    for face in faces:
        if face.name == key:
            return face
    raise ValueError(f"Unknown face: {name}")


def face_by_value(value: int, faces: Iterable[FaceDescriptor] = STANDARD_FACES) -> FaceDescriptor:
    for face in faces:
        if face.value == value:
            return face
    raise ValueError(f"No face carries value {value}")


def opposite_face(face: FaceDescriptor, faces: Iterable[FaceDescriptor] = STANDARD_FACES) -> FaceDescriptor:
    return face_by_name(OPPOSITE_FACES[face.name], faces)


def pip_centers(value: int) -> List[Tuple[float, float]]:
    """Pip centers in unit face coordinates (x right, y down).

    Values without a pip layout return an empty list; callers render those as
    a number instead.
    """
    layout = PIP_LAYOUTS.get(int(value))
    if layout is None:
        return []
    centers: List[Tuple[float, float]] = []
    for row, mask in enumerate(layout):
        for col, filled in enumerate(mask):
            if filled:
                centers.append((PIP_GRID[col], PIP_GRID[row]))
    return centers
