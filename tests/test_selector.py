import numpy as np
import pytest

from dice_roller.core.geometry import TWO_PI, FaceGeometryResolver
from dice_roller.core.roll import FACE_ROTATIONS, MAX_JITTER, CubeOutcomeSelector, FlatOutcomeSelector


class ScriptedRng:
    """Replays fixed draws in the order the cube selector requests them."""

    def __init__(self, integers, random=0.5) -> None:
        self._integers = list(integers)
        self._random = random

    def integers(self, low, high=None, size=None):
        value = self._integers.pop(0)
        assert low <= value < high
        return value

    def random(self):
        return self._random


def test_flat_values_stay_in_range() -> None:
    rng = np.random.default_rng(7)
    for sides in (1, 2, 6, 20, 100):
        selector = FlatOutcomeSelector(rng=rng)
        values = [selector.select_value(sides) for _ in range(500)]
        assert min(values) >= 1
        assert max(values) <= sides


def test_flat_single_side_always_one() -> None:
    selector = FlatOutcomeSelector(rng=np.random.default_rng(1))
    assert {selector.select_outcome(1).face_value for _ in range(20)} == {1}


def test_flat_distribution_is_uniform() -> None:
    selector = FlatOutcomeSelector(rng=np.random.default_rng(12345))
    trials = 10000
    counts = np.zeros(6)
    for _ in range(trials):
        counts[selector.select_value(6) - 1] += 1
    expected = trials / 6.0
    chi_square = float(np.sum((counts - expected) ** 2 / expected))
    # df=5, p=0.001
    assert chi_square < 20.515


def test_flat_target_is_whole_turns() -> None:
    selector = FlatOutcomeSelector(rng=np.random.default_rng(3))
    for _ in range(50):
        outcome = selector.select_outcome(12)
        turns = outcome.target_rotation / TWO_PI
        np.testing.assert_allclose(turns, np.round(turns))
        assert np.all(turns >= 1) and np.all(turns <= 5)
        assert 0.0 <= outcome.jitter < MAX_JITTER


@pytest.mark.parametrize("sides", [0, -1, 2.5])
def test_flat_rejects_invalid_sides(sides) -> None:
    selector = FlatOutcomeSelector()
    with pytest.raises(ValueError):
        selector.select_outcome(sides)


@pytest.mark.parametrize("sides", [4, 8, 20])
def test_cube_rejects_other_side_counts(sides) -> None:
    with pytest.raises(ValueError, match="exactly 6"):
        CubeOutcomeSelector().select_outcome(sides)


def test_cube_scripted_draws_land_on_value() -> None:
    # value 4, second base option, 3 extra spins
    selector = CubeOutcomeSelector(rng=ScriptedRng([4, 1, 3], random=0.25))
    outcome = selector.select_outcome()
    assert outcome.face_value == 4
    assert outcome.spins == 3
    np.testing.assert_allclose(outcome.base_rotation, FACE_ROTATIONS[4][1])
    np.testing.assert_allclose(outcome.target_rotation - outcome.base_rotation, np.full(3, 3 * TWO_PI))
    assert outcome.jitter == pytest.approx(0.25 * MAX_JITTER)
    assert FaceGeometryResolver().frontmost(outcome.target_rotation).value == 4


def test_cube_spins_and_values_in_range() -> None:
    selector = CubeOutcomeSelector(rng=np.random.default_rng(99))
    seen = set()
    for _ in range(300):
        outcome = selector.select_outcome()
        seen.add(outcome.face_value)
        assert 2 <= outcome.spins <= 4
        assert 0.0 <= outcome.jitter < MAX_JITTER
    assert seen == {1, 2, 3, 4, 5, 6}
