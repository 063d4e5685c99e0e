"""2-D points and sizes, and their conversions to complex numbers."""

from __future__ import annotations

import math
from typing import NamedTuple

from stdshims.errors import require_not_none


class Point(NamedTuple):
    """A point on the plane."""

    x: float
    y: float


class Size(NamedTuple):
    """Width and height of a rectangle."""

    width: float
    height: float


def point_to_complex(point: Point) -> complex:
    """Map ``(x, y)`` onto ``x + yj``."""
    x, y = require_not_none(point, "point")
    return complex(x, y)


def complex_to_point(value: complex) -> Point:
    z = require_not_none(value, "value")
    return Point(z.real, z.imag)


def size_to_complex(size: Size) -> complex:
    width, height = require_not_none(size, "size")
    return complex(width, height)


def point_to_size(point: Point) -> Size:
    x, y = require_not_none(point, "point")
    return Size(x, y)


def size_to_point(size: Size) -> Point:
    width, height = require_not_none(size, "size")
    return Point(width, height)


def offset(point: Point, size: Size) -> Point:
    """Shift *point* by *size*."""
    x, y = require_not_none(point, "point")
    width, height = require_not_none(size, "size")
    return Point(x + width, y + height)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    ax, ay = require_not_none(a, "a")
    bx, by = require_not_none(b, "b")
    return math.hypot(bx - ax, by - ay)
