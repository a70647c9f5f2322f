import numpy as np
import pytest

from dice_roller.core import RollerDefinition, RollPhase, controller_from_definition
from dice_roller.core.geometry import rotation_matrix


def _cube(seed: int = 0):
    return controller_from_definition(RollerDefinition(), rng=np.random.default_rng(seed))


def test_roll_request_moves_to_rolling() -> None:
    controller = _cube()
    assert controller.phase == RollPhase.IDLE
    assert controller.current_value == 1
    assert controller.request_roll()
    assert controller.phase == RollPhase.ROLLING
    outcome = controller.outcome
    assert not controller.request_roll()
    assert controller.outcome is outcome


def test_second_trigger_keeps_in_flight_state() -> None:
    controller = _cube(4)
    controller.request_roll()
    outcome = controller.outcome
    state = controller.advance(0.4)
    rotation = np.array(state.rotation)
    assert not controller.request_roll()
    assert controller.outcome is outcome
    assert controller.state is state
    np.testing.assert_allclose(controller.rotation, rotation)
    assert controller.state.elapsed_fraction == pytest.approx(0.4)


def test_completion_listener_runs_once_per_roll() -> None:
    controller = _cube(1)
    values = []
    started = []
    controller.add_completion_listener(values.append)
    controller.add_start_listener(started.append)
    controller.request_roll()
    for fraction in np.linspace(0.0, 1.0, 60):
        controller.advance(fraction)
    controller.advance(1.0)
    assert values == [controller.outcome.face_value]
    assert started == [controller.outcome]
    assert controller.phase == RollPhase.IDLE
    assert controller.current_value == values[0]


def test_resting_face_matches_outcome() -> None:
    controller = _cube(2024)
    resolver = controller.resolver
    for _ in range(1000):
        controller.request_roll()
        controller.advance(1.0)
        value = controller.outcome.face_value
        front = resolver.frontmost(controller.rotation)
        assert front.value == value
        assert front.depth >= 0.95 * resolver.half_size
        assert controller.displayed_value() == value


def test_next_roll_launches_from_rest_pose() -> None:
    controller = _cube(5)
    controller.request_roll()
    controller.advance(1.0)
    rest = np.array(controller.rotation)
    controller.request_roll()
    start = controller.rotation
    assert np.all(start > -np.pi) and np.all(start <= np.pi)
    np.testing.assert_allclose(rotation_matrix(start), rotation_matrix(rest), atol=1e-9)


def test_tick_maps_elapsed_time() -> None:
    controller = _cube(3)
    controller.request_roll()
    state = controller.tick(2000)
    assert state.elapsed_fraction == pytest.approx(0.5)
    with pytest.raises(ValueError):
        controller.tick(1000)
    controller.tick(5000)
    assert not controller.is_rolling


def test_advance_while_idle_is_noop() -> None:
    controller = _cube()
    state = controller.state
    assert controller.advance(0.5) is state
    assert controller.phase == RollPhase.IDLE


def test_flat_controller_rolls_any_side_count() -> None:
    definition = RollerDefinition(variant="flat", sides=20)
    controller = controller_from_definition(definition, rng=np.random.default_rng(8))
    assert controller.resolver is None
    seen = set()
    for _ in range(200):
        controller.request_roll()
        controller.advance(1.0)
        seen.add(controller.current_value)
    assert min(seen) >= 1 and max(seen) <= 20
    with pytest.raises(RuntimeError):
        controller.visible_order()


def test_invalid_side_counts_are_rejected() -> None:
    with pytest.raises(ValueError):
        controller_from_definition(RollerDefinition(variant="flat", sides=0))
    with pytest.raises(ValueError, match="exactly 6"):
        controller_from_definition(RollerDefinition(variant="cube", sides=5))


def test_reroll_from_completion_listener_starts_fresh() -> None:
    controller = _cube(6)
    rerolled = []

    def roll_again(value: int) -> None:
        if not rerolled:
            rerolled.append(controller.request_roll())

    controller.add_completion_listener(roll_again)
    controller.request_roll()
    first = controller.outcome
    state = controller.advance(1.0)
    assert rerolled == [True]
    assert controller.phase == RollPhase.ROLLING
    assert controller.outcome is not first
    assert state.elapsed_fraction == 0.0
    assert controller.state.elapsed_fraction == 0.0
    controller.advance(0.5)
    assert controller.is_rolling
    controller.advance(1.0)
    assert not controller.is_rolling
    assert controller.current_value == controller.outcome.face_value
