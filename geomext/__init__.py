import logging

from .scalar import *
from .point import (
    Point,
    RightTriangle,
    absolute,
    angle_between,
    distance,
    distant_point,
    distant_point_from_radians,
    dot,
    length,
    midpoint,
    normalized,
    point_on_arc,
    projection,
    right_triangle_angles,
    rounded,
)
from .size import Size
from . import numerics, point, scalar, size

logging.getLogger(__name__).addHandler(logging.NullHandler())
