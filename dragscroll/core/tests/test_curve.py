import pytest

from dragscroll.core.curve import CURVE_CEILING, velocity_curve


def curve(d, h=20):
    return velocity_curve(d, h, 0.25, 0.3)


def test_zero_delta_is_zero():
    assert curve(0) == 0
    assert velocity_curve(0, 1, 100.0, 100.0) == 0


def test_odd_symmetry():
    for d in (1, 7, 19, 20, 33, 100, 250, 999):
        assert curve(-d) == -curve(d)


def test_monotonic_in_magnitude():
    prev = 0
    for d in range(0, 2000, 3):
        cur = abs(curve(d))
        assert cur >= prev
        prev = cur


def test_linear_without_acceleration():
    # two lines of drag at scale 0.25 -> half a line
    assert velocity_curve(40, 20, 0.25, 0.0) == 10
    assert velocity_curve(-40, 20, 0.25, 0.0) == -10
    assert velocity_curve(20, 20, 1.0, 0.0) == 20


def test_default_curve_value():
    # f=5: (1.25 ** 2.5) * 20 = 34.9...
    assert curve(100) == 34
    assert curve(-100) == -34


def test_small_drags_stay_small():
    assert curve(1) == 0
    assert abs(curve(5)) < 20


def test_overflow_is_clamped():
    big = velocity_curve(10 ** 9, 1, 1.0, 1.0)
    assert big == int(CURVE_CEILING)
    assert velocity_curve(-(10 ** 9), 1, 1.0, 1.0) == -int(CURVE_CEILING)


def test_bad_line_height():
    with pytest.raises(ValueError):
        velocity_curve(10, 0, 0.25, 0.3)
