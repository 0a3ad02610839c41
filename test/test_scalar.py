import logging
import math
import warnings

import numpy as np

import geomext


def test_degree_radian_conversion():
    assert np.isclose(geomext.to_degrees(np.pi), 180)
    assert np.isclose(geomext.to_radians(90), np.pi / 2)
    assert geomext.to_degrees(0) == 0

    for x in [-720.0, -1.5, 0.25, 33.0, 1e6]:
        assert np.isclose(geomext.to_degrees(geomext.to_radians(x)), x)
        assert np.isclose(geomext.to_radians(geomext.to_degrees(x)), x)


def test_arc_length():
    # sign follows start - end
    assert np.isclose(geomext.arc_length(0, 90, 1), -np.pi / 2)
    assert np.isclose(geomext.arc_length(90, 0, 1), np.pi / 2)

    # only the circumference is made non-negative
    assert np.isclose(geomext.arc_length(90, 0, -1), np.pi / 2)
    assert np.isclose(geomext.arc_length(360, 0, 2), 4 * np.pi)
    assert geomext.arc_length(45, 45, 10) == 0


def test_arc_length_from_radians():
    assert np.isclose(geomext.arc_length_from_radians(np.pi, 0, 2), 2 * np.pi)
    assert np.isclose(geomext.arc_length_from_radians(0, np.pi / 2, 1), -np.pi / 2)

    start, end, radius = 0.3, 1.7, 4.5
    expected = geomext.arc_length(
        geomext.to_degrees(start), geomext.to_degrees(end), radius
    )
    assert geomext.arc_length_from_radians(start, end, radius) == expected


def test_radians_from_arc_length():
    assert np.isclose(geomext.radians_from_arc_length(np.pi, 2), np.pi / 2)
    assert geomext.radians_from_arc_length(-3, 1) == -3


def test_radians_from_arc_length_zero_radius():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert geomext.radians_from_arc_length(1, 0) == math.inf
        assert geomext.radians_from_arc_length(-1, 0) == -math.inf
        assert math.isnan(geomext.radians_from_arc_length(0, 0))


def test_zero_division_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="geomext"):
        geomext.radians_from_arc_length(1, 0)
    assert "divide by zero" in caplog.text


def test_fuzzy_equals_exact():
    for a in [0.0, -1.0, 1e-20, 3.5, 1e30, math.inf]:
        assert geomext.fuzzy_equals(a, a)
        assert geomext.fuzzy_equals(a, a, epsilon=1e-9)


def test_fuzzy_equals_relative():
    assert geomext.fuzzy_equals(1.0, 1.005, 0.01)
    assert not geomext.fuzzy_equals(1.0, 1.03, 0.01)

    # the difference is measured against |a| + |b|: 0.02 / 2.02 < 0.01
    assert geomext.fuzzy_equals(1.0, 1.02, 0.01)
    assert geomext.fuzzy_equals(-1000.0, -1010.0)
    assert not geomext.fuzzy_equals(1.0, -1.0)

    # default epsilon is 0.01
    assert geomext.DEFAULT_EPSILON == 0.01
    assert geomext.fuzzy_equals(100.0, 101.0)
    assert not geomext.fuzzy_equals(100.0, 103.0)


def test_fuzzy_equals_near_zero():
    assert not geomext.fuzzy_equals(0.0, 0.1, 0.01)

    # near zero the difference must be below epsilon * FUZZY_FLOOR
    assert geomext.fuzzy_equals(0.0, 1e-16, 0.01)
    assert not geomext.fuzzy_equals(0.0, 1e-14, 0.01)
    assert geomext.fuzzy_equals(0.0, 1e-14, 0.5)

    # tiny difference between non-zero values goes through the same check
    assert geomext.fuzzy_equals(1.0, 1.0 + 2e-16, 0.01)
    assert not geomext.fuzzy_equals(1e-14, 5e-14, 0.01)


def test_fuzzy_equals_nan():
    assert not geomext.fuzzy_equals(math.nan, math.nan)
    assert not geomext.fuzzy_equals(math.nan, 1.0)


def test_scalar_exports():
    for name in geomext.scalar.__all__:
        assert getattr(geomext, name) is getattr(geomext.scalar, name)
    assert not hasattr(geomext, "fdiv")
    assert not hasattr(geomext, "np")
