"""2D size arithmetic."""
from dataclasses import dataclass

import numpy as np

from .numerics import fdiv


@dataclass(frozen=True)
class Size:
    """2D extent. Width and height may be negative."""

    width: float = 0.0
    height: float = 0.0

    # numpy scalars defer to the operators below
    __array_ufunc__ = None

    @classmethod
    def of(cls, pair):
        """Coerce a pair of numbers (tuple, array or Size) into a Size."""
        if isinstance(pair, cls):
            return pair
        width, height = pair
        return cls(float(width), float(height))

    def __iter__(self):
        yield self.width
        yield self.height

    def __array__(self, dtype=None, copy=None):
        return np.array([self.width, self.height], dtype=dtype)

    def __add__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, multiplicand):
        if isinstance(multiplicand, Size):
            return NotImplemented
        return Size(self.width * multiplicand, self.height * multiplicand)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, Size):
            return NotImplemented
        return Size(fdiv(self.width, divisor), fdiv(self.height, divisor))


def add(a, b):
    return Size.of(a) + Size.of(b)


def sub(a, b):
    return Size.of(a) - Size.of(b)


def scale(a, multiplicand):
    return Size.of(a) * multiplicand


def divide(a, divisor):
    """Divide width and height by ``divisor``; zero yields inf or nan."""
    return Size.of(a) / divisor
