from fractions import Fraction

import pytest

from tvsc.units import KILO, MILLI, UNIT, in_unit


def test_unit_ratio_leaves_value_unchanged():
    assert in_unit(UNIT, 7) == 7.0


def test_milli_scales_down():
    assert in_unit(MILLI, 1500) == pytest.approx(1.5)


def test_round_trip_through_inverse_units():
    for value in (0.0, 2.0, 12345.0, -3.25):
        assert in_unit(KILO, in_unit(MILLI, value)) == pytest.approx(value)


def test_result_is_float_for_integer_input():
    result = in_unit(Fraction(1, 4), 2)
    assert isinstance(result, float)
    assert result == 0.5


def test_scaling_is_monotonic():
    assert in_unit(MILLI, 10) < in_unit(MILLI, 20) < in_unit(KILO, 1)