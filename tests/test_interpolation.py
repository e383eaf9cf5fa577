import pytest

from piggyplat.interpolation import InterpolationType, interpolate


@pytest.mark.parametrize("kind", list(InterpolationType))
def test_one_is_a_fixed_point(kind):
    assert interpolate(kind, 0.0, 1.0, 1.0) == 1.0


@pytest.mark.parametrize("kind", list(InterpolationType))
def test_zero_is_a_fixed_point(kind):
    assert interpolate(kind, 0.0, 1.0, 0.0) == 0.0


def test_linear_passes_value_through():
    assert interpolate(InterpolationType.LINEAR, 0.0, 1.0, 0.3) == pytest.approx(0.3)


def test_quadratic_squares():
    assert interpolate(InterpolationType.QUADRATIC, 0.0, 1.0, 0.5) == 0.25


def test_cubic_cubes():
    assert interpolate(InterpolationType.CUBIC, 0.0, 1.0, 0.5) == 0.125


def test_value_below_minimum_is_clamped():
    assert interpolate(InterpolationType.LINEAR, 0.2, 1.0, -4.0) == pytest.approx(0.2)


def test_value_above_maximum_is_clamped():
    assert interpolate(InterpolationType.LINEAR, 0.0, 0.7, 9.0) == pytest.approx(0.7)


def test_cubic_clamps_before_applying_curve():
    assert interpolate(InterpolationType.CUBIC, -1.0, 1.0, -3.0) == -1.0


def test_inverted_bounds_end_at_maximum():
    assert interpolate(InterpolationType.LINEAR, 1.0, 0.4, 0.0) == pytest.approx(0.4)


@pytest.mark.parametrize("kind", list(InterpolationType))
def test_curves_are_monotonic_on_unit_interval(kind):
    samples = [interpolate(kind, 0.0, 1.0, x / 10) for x in range(11)]
    assert samples == sorted(samples)


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        interpolate("sine", 0.0, 1.0, 0.5)