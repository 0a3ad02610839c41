"""Angle conversion, arc length and fuzzy comparison of scalars."""
import numpy as np

from .numerics import fdiv

__all__ = [
    "DEFAULT_EPSILON",
    "FUZZY_FLOOR",
    "to_degrees",
    "to_radians",
    "arc_length",
    "arc_length_from_radians",
    "radians_from_arc_length",
    "fuzzy_equals",
]

# relative tolerance used by fuzzy_equals when none is given
DEFAULT_EPSILON = 0.01

# differences below this are treated as near zero by fuzzy_equals
FUZZY_FLOOR = 1e-13


def to_degrees(radians):
    """Convert radians to degrees."""
    return radians * (180 / np.pi)


def to_radians(degrees):
    """Convert degrees to radians."""
    return (np.pi * degrees) / 180


def arc_length(start_angle, end_angle, radius):
    """Length of the arc between two angles.

    Parameters
    ----------
    start_angle : float
        The beginning of the arc in degrees.
    end_angle : float
        The end of the arc in degrees.
    radius : float
        Radius of the arc.

    Returns
    -------
    : float
        Length of the arc. The sign of the result follows
        ``start_angle - end_angle``; only the circumference is taken as an
        absolute value.
    """
    angle = start_angle - end_angle
    return abs(2 * np.pi * radius) * (angle / 360)


def arc_length_from_radians(start_radians, end_radians, radius):
    """Length of the arc between two angles given in radians.

    The angles go through degrees so that the result is bit-for-bit the same
    as :func:`arc_length`.
    """
    start = to_degrees(start_radians)
    end = to_degrees(end_radians)
    return arc_length(start, end, radius)


def radians_from_arc_length(length, radius):
    """Angle (from zero) subtended by an arc of the given length.

    A zero radius is not guarded: the result is inf or nan.
    """
    return fdiv(length, radius)


def fuzzy_equals(a, b, epsilon=DEFAULT_EPSILON):
    """Check if two scalars are approximately equal.

    Parameters
    ----------
    a, b : float
        Scalars to compare.
    epsilon : float
        Relative difference under which the scalars are considered equal.

    Returns
    -------
    : bool
        True if ``a`` and ``b`` are equal within ``epsilon``. When either
        value is zero, or the two are closer than ``FUZZY_FLOOR``, the
        absolute difference must be below ``epsilon * FUZZY_FLOOR``, which
        effectively requires exact equality near zero.
    """
    if a == b:
        return True

    diff = abs(a - b)
    if a == 0 or b == 0 or diff < FUZZY_FLOOR:
        return diff < epsilon * FUZZY_FLOOR
    return diff / (abs(a) + abs(b)) < epsilon
