from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from ..model import STANDARD_FACES, FaceDescriptor, FaceName, Vector
from ..model.faces import _to_vector
from .transforms import rotation_matrix


@dataclass(frozen=True, eq=False)
class PlacedFace:
    face: FaceDescriptor
    depth: float
    center: Vector
    corners: np.ndarray

    @property
    def name(self) -> FaceName:
        return self.face.name

    @property
    def value(self) -> int:
        return self.face.value


class FaceGeometryResolver:
    """Rotates the six face planes and orders them for a painter's-algorithm draw.

    Depth is the view-frame z coordinate of each face center; the viewer looks
    down -z, so larger depth is nearer.
    """

    def __init__(self, half_size: float = 1.0, faces: Sequence[FaceDescriptor] = STANDARD_FACES) -> None:
        if half_size <= 0:
            raise ValueError("half_size must be positive")
        faces_tuple = tuple(faces)
        if len(faces_tuple) != 6:
            raise ValueError("A cube die needs exactly 6 faces")
        self._half_size = float(half_size)
        self._faces = faces_tuple
        self._rest_positions = np.stack([face.rest_position(self._half_size) for face in faces_tuple])
        self._rest_corners = np.stack([face.corners(self._half_size) for face in faces_tuple])

    @property
    def half_size(self) -> float:
        return self._half_size

    @property
    def faces(self) -> tuple[FaceDescriptor, ...]:
        return self._faces

    def face_depths(self, rotation: Iterable[float]) -> np.ndarray:
        matrix = rotation_matrix(rotation)
        return (self._rest_positions @ matrix.T)[:, 2]

    def compute_visible_order(self, rotation: Iterable[float]) -> List[PlacedFace]:
        """Faces sorted back-to-front after applying ``rotation``."""
        matrix = rotation_matrix(rotation)
        centers = self._rest_positions @ matrix.T
        corners = self._rest_corners @ matrix.T
        order = np.argsort(centers[:, 2], kind="mergesort")
        return [
            PlacedFace(
                face=self._faces[idx],
                depth=float(centers[idx, 2]),
                center=centers[idx],
                corners=corners[idx],
            )
            for idx in order
        ]

    def frontmost(self, rotation: Iterable[float]) -> PlacedFace:
        return self.compute_visible_order(rotation)[-1]


def heuristic_visible_order(
    rotation: Iterable[float], faces: Sequence[FaceDescriptor] = STANDARD_FACES
) -> List[FaceDescriptor]:
    """Per-axis approximation of ``FaceGeometryResolver.compute_visible_order``.

    Each opposing pair is weighted by the cosine of a single angle, so compound
    rotations can be mis-ordered. Only meant for hosts without matrix math.
    """
    x, y, z = _to_vector(rotation, length=3)
    weights = {
        FaceName.FRONT: np.cos(y),
        FaceName.BACK: -np.cos(y),
        FaceName.RIGHT: np.cos(x),
        FaceName.LEFT: -np.cos(x),
        FaceName.TOP: np.cos(z),
        FaceName.BOTTOM: -np.cos(z),
    }
    faces_list = list(faces)
    keys = np.array([weights[face.name] for face in faces_list], dtype=float)
    order = np.argsort(keys, kind="mergesort")
    return [faces_list[idx] for idx in order]
