"""2D point and vector algebra."""
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .numerics import fdiv, ungated
from . import scalar


def _round_half_away(value, ndigits=0):
    with ungated():
        scaled = value * np.float_power(10.0, ndigits)
        t = np.trunc(scaled)
        if abs(scaled - t) >= 0.5:
            t += np.copysign(1.0, scaled)
        if ndigits == 0:
            return float(t)
        return float(t / np.float_power(10.0, ndigits))


@dataclass(frozen=True)
class Point:
    """2D point, also used as the vector from the origin to that point."""

    x: float = 0.0
    y: float = 0.0

    # numpy scalars defer to the operators below
    __array_ufunc__ = None

    @classmethod
    def of(cls, pair):
        """Coerce a pair of numbers (tuple, array or Point) into a Point."""
        if isinstance(pair, cls):
            return pair
        x, y = pair
        return cls(float(x), float(y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y], dtype=dtype)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, multiplicand):
        if isinstance(multiplicand, Point):
            return NotImplemented
        return Point(self.x * multiplicand, self.y * multiplicand)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Point):
            return NotImplemented
        return Point(fdiv(self.x, divisor), fdiv(self.y, divisor))

    def __abs__(self):
        return Point(abs(self.x), abs(self.y))

    def __round__(self, ndigits=None):
        """Round both coordinates, halves away from zero."""
        if ndigits is None:
            return self.rounded
        return Point(
            _round_half_away(self.x, ndigits), _round_half_away(self.y, ndigits)
        )

    @property
    def length(self):
        """Length of the vector."""
        return float(np.sqrt(dot(self, self)))

    @property
    def normalized(self):
        """Unit vector in the same direction.

        The zero vector has no direction: its components come out as nan.
        """
        return self * fdiv(1, self.length)

    @property
    def rounded(self):
        """Point with both coordinates rounded to the nearest integer.

        Halves are rounded away from zero.
        """
        return Point(_round_half_away(self.x), _round_half_away(self.y))

    def distance_to(self, other):
        """Euclidean distance to another point."""
        other = Point.of(other)
        with ungated():
            return float(
                np.sqrt(np.square(other.x - self.x) + np.square(other.y - self.y))
            )


class RightTriangle(NamedTuple):
    """Angles (in degrees) and hypotenuse of a right triangle."""

    adjacent_angle: float
    opposite_angle: float
    hypotenuse: float


def add(a, b):
    return Point.of(a) + Point.of(b)


def sub(a, b):
    return Point.of(a) - Point.of(b)


def scale(a, multiplicand):
    return Point.of(a) * multiplicand


def divide(a, divisor):
    """Divide both coordinates by ``divisor``; zero yields inf or nan."""
    return Point.of(a) / divisor


def length(p):
    return Point.of(p).length


def normalized(p):
    return Point.of(p).normalized


def absolute(p):
    return abs(Point.of(p))


def rounded(p):
    return Point.of(p).rounded


def dot(a, b):
    """Dot product of two vectors."""
    a = Point.of(a)
    b = Point.of(b)
    return a.x * b.x + a.y * b.y


def projection(a, b):
    """Projection of vector ``a`` onto vector ``b``.

    Parameters
    ----------
    a : pair of float
        The vector to project.
    b : pair of float
        The vector to project onto. The zero vector gives nan components.

    Returns
    -------
    : Point
        The component of ``a`` along ``b``.
    """
    b = Point.of(b)
    return b * fdiv(dot(a, b), dot(b, b))


def midpoint(a, b):
    """Point halfway between ``a`` and ``b``."""
    return (Point.of(a) + Point.of(b)) * 0.5


def distance(a, b):
    """Euclidean distance between two points."""
    return Point.of(a).distance_to(b)


def angle_between(start, end):
    """Angle of the vector from ``start`` to ``end``.

    Parameters
    ----------
    start : pair of float
        The point to evaluate the angle from.
    end : pair of float
        The point to evaluate the angle to.

    Returns
    -------
    : float
        Angle in radians with respect to the positive x-axis, in the interval
        (-pi, pi].
    """
    start = Point.of(start)
    end = Point.of(end)
    return float(np.arctan2(end.y - start.y, end.x - start.x))


def fuzzy_equals(a, b, epsilon):
    """True if both coordinates of the points are fuzzy-equal.

    See :func:`geomext.scalar.fuzzy_equals` for the comparison rule.
    """
    a = Point.of(a)
    b = Point.of(b)
    return scalar.fuzzy_equals(a.x, b.x, epsilon) and scalar.fuzzy_equals(
        a.y, b.y, epsilon
    )


def point_on_arc(radians, radius):
    """Point on a circle centered at the origin.

    Parameters
    ----------
    radians : float
        Angle from the positive x-axis.
    radius : float
        Radius of the circle (distance from the center).

    Returns
    -------
    : Point
        The point at the given angle on the circle.
    """
    x = np.cos(radians) * radius
    y = np.sin(radians) * radius
    return Point(float(x), float(y))


def distant_point(origin, length, angle):
    """Point at ``length`` from ``origin`` in direction ``angle`` (degrees)."""
    return distant_point_from_radians(origin, length, scalar.to_radians(angle))


def distant_point_from_radians(origin, length, radians):
    """Point at ``length`` from ``origin`` in direction ``radians``."""
    return Point.of(origin) + point_on_arc(radians, length)


def right_triangle_angles(adjacent_length, opposite_length):
    """Angles and hypotenuse of a right triangle from the lengths of its legs.

    Parameters
    ----------
    adjacent_length : float
        Length of the adjacent side.
    opposite_length : float
        Length of the opposite side.

    Returns
    -------
    : RightTriangle
        The angle between the adjacent side and the hypotenuse, the angle
        between the opposite side and the hypotenuse (both in degrees) and the
        length of the hypotenuse.

    Notes
    -----
    The hypotenuse is computed from the adjacent side alone,
    ``sqrt(2 * adjacent_length**2)``; ``opposite_length`` is not read. Code
    built on this function relies on that result, so it is kept as is.
    """
    with ungated():
        hypotenuse = float(
            np.sqrt(np.square(adjacent_length) + np.square(adjacent_length))
        )
        radians = float(np.arcsin(np.divide(adjacent_length, hypotenuse)))
    adjacent_angle = scalar.to_degrees(radians)
    opposite_angle = 90 - adjacent_angle
    return RightTriangle(adjacent_angle, opposite_angle, hypotenuse)
