import numpy as np
import pytest

from dice_roller.core.anim import (
    CURVE_IDS,
    EASE_IN_OUT,
    EASE_OUT_QUAD,
    LINEAR,
    BounceSegment,
    BounceSequence,
    Interval,
    curve_from_id,
    curve_id_from_instance,
    damped_bounce,
)


def test_curves_hit_endpoints() -> None:
    for curve in CURVE_IDS.values():
        assert curve.transform(0.0) == 0.0
        assert curve.transform(1.0) == 1.0


def test_curves_are_monotonic() -> None:
    samples = np.linspace(0.0, 1.0, 201)
    for curve in CURVE_IDS.values():
        values = np.array([curve.transform(t) for t in samples])
        assert np.all(np.diff(values) >= -1e-6)


def test_ease_out_leads_linear() -> None:
    assert EASE_OUT_QUAD.transform(0.5) > LINEAR.transform(0.5)
    assert EASE_IN_OUT.transform(0.5) == pytest.approx(0.5, abs=1e-4)


def test_curve_input_is_clamped() -> None:
    assert EASE_OUT_QUAD.transform(-0.5) == 0.0
    assert EASE_OUT_QUAD.transform(1.5) == 1.0
    with pytest.raises(ValueError):
        LINEAR.transform(float("nan"))


def test_interval_holds_outside_window() -> None:
    interval = Interval(0.2, 0.6)
    assert interval.transform(0.1) == 0.0
    assert interval.transform(0.4) == pytest.approx(0.5)
    assert interval.transform(0.9) == 1.0
    with pytest.raises(ValueError):
        Interval(0.6, 0.2)


def test_curve_ids_resolve() -> None:
    assert curve_from_id("ease_out_quad") is EASE_OUT_QUAD
    assert curve_id_from_instance(EASE_IN_OUT) == "ease_in_out"
    with pytest.raises(ValueError, match="Unknown curve id"):
        curve_from_id("bouncy")


def test_bounce_sequence_weights() -> None:
    sequence = BounceSequence((BounceSegment(0.0, -10.0, 1.0), BounceSegment(-10.0, 0.0, 3.0)))
    assert sequence.total_weight == 4.0
    assert sequence.transform(0.25) == pytest.approx(-10.0)
    assert sequence.transform(0.125) == pytest.approx(-5.0)
    assert sequence.transform(1.0) == 0.0


def test_damped_bounce_peaks_decrease() -> None:
    sequence = damped_bounce((40.0, 20.0, 5.0))
    peaks = [segment.end for segment in sequence.segments[0::2]]
    assert peaks == [-40.0, -20.0, -5.0]
    assert sequence.transform(0.0) == 0.0
    assert sequence.transform(1.0) == 0.0
    with pytest.raises(ValueError):
        damped_bounce((10.0,), weights=())
