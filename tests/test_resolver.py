import numpy as np
import pytest

from dice_roller.core.geometry import (
    FaceGeometryResolver,
    VisibleFaceTracker,
    heuristic_visible_order,
    project_points,
    rotation_matrix,
    wrap_angles,
)
from dice_roller.core.model import FaceName
from dice_roller.core.roll import FACE_ROTATIONS


def test_identity_order_is_back_to_front() -> None:
    order = FaceGeometryResolver().compute_visible_order((0.0, 0.0, 0.0))
    assert len(order) == 6
    assert order[0].name == FaceName.BACK
    assert order[-1].name == FaceName.FRONT
    depths = [placed.depth for placed in order]
    assert depths == sorted(depths)


def test_every_base_rotation_shows_its_value() -> None:
    resolver = FaceGeometryResolver()
    for value, rotations in FACE_ROTATIONS.items():
        for rotation in rotations:
            front = resolver.frontmost(rotation)
            assert front.value == value, (value, rotation)
            assert front.depth == pytest.approx(1.0)


def test_depth_scales_with_half_size() -> None:
    resolver = FaceGeometryResolver(half_size=50.0)
    depths = resolver.face_depths((0.0, np.pi / 2, 0.0))
    assert max(depths) == pytest.approx(50.0)


def test_rotation_matrix_is_orthonormal() -> None:
    matrix = rotation_matrix((0.3, -1.1, 2.4))
    np.testing.assert_allclose(matrix @ matrix.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(matrix) == pytest.approx(1.0)


def test_wrap_angles_keeps_orientation() -> None:
    rotation = np.array([7.5, -9.0, 10.0])
    wrapped = wrap_angles(rotation)
    assert np.all(wrapped > -np.pi) and np.all(wrapped <= np.pi)
    np.testing.assert_allclose(rotation_matrix(wrapped), rotation_matrix(rotation), atol=1e-12)


def test_project_points_orthographic() -> None:
    points = np.array([[1.0, 2.0, 3.0], [-1.0, 0.5, -2.0]])
    np.testing.assert_allclose(project_points(points), points[:, :2])
    with pytest.raises(ValueError):
        project_points(np.zeros((2, 2)))


def test_heuristic_order_at_identity() -> None:
    order = heuristic_visible_order((0.0, 0.0, 0.0))
    assert len(order) == 6
    assert order[0].name == FaceName.BACK
    assert FaceName.FRONT in {face.name for face in order[3:]}


def test_tracker_commits_above_threshold() -> None:
    resolver = FaceGeometryResolver()
    tracker = VisibleFaceTracker(resolver)
    assert tracker.update((0.0, np.pi / 2, 0.0), animating=False) == 3
    assert tracker.committed_value == 3


def test_tracker_below_threshold_strict_keeps_value() -> None:
    resolver = FaceGeometryResolver()
    tracker = VisibleFaceTracker(resolver, strict=True, initial_value=1)
    # Right face is frontmost at depth cos(30 deg), under 0.95.
    assert tracker.update((0.0, np.pi / 3, 0.0), animating=False) == 1


def test_tracker_below_threshold_commits_deepest_face() -> None:
    resolver = FaceGeometryResolver()
    tracker = VisibleFaceTracker(resolver, initial_value=1)
    assert tracker.update((0.0, np.pi / 3, 0.0), animating=False) == 3


def test_tracker_ignores_animation_frames() -> None:
    resolver = FaceGeometryResolver()
    tracker = VisibleFaceTracker(resolver, initial_value=2)
    assert tracker.update((0.0, np.pi / 2, 0.0), animating=True) == 2
    tracker.reset(5)
    assert tracker.committed_value == 5


def test_tracker_rejects_bad_threshold() -> None:
    with pytest.raises(ValueError):
        VisibleFaceTracker(FaceGeometryResolver(), threshold=0.0)
