import logging
import numpy as np

from dataclasses import dataclass
from fractions import Fraction
from typing import Callable

log = logging.getLogger(__name__)

Slope = float | Fraction
Comparator = Callable[["Point", "Point"], int]

POSITIVE_ZERO = 0.0
POSITIVE_INF = float('inf')
NEGATIVE_INF = float('-inf')


class InvalidInputError(ValueError):
    """
    Raised when a point set cannot be used by a collinearity detector:
    missing input, missing points or repeated points.
    """


def _as_coordinate(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f'coordinate must be an integer, got {value!r}')
    return int(value)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        # numpy scalars are normalized so that hashing and division behave like int
        object.__setattr__(self, 'x', _as_coordinate(self.x))
        object.__setattr__(self, 'y', _as_coordinate(self.y))

    def __str__(self):
        return f'({self.x}, {self.y})'

    def compare(self, other: 'Point') -> int:
        """
        Natural order: by y, then by x.
        """
        if self.y != other.y:
            return -1 if self.y < other.y else 1
        if self.x != other.x:
            return -1 if self.x < other.x else 1
        return 0

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    def slope_to(self, other: 'Point', exact: bool = False) -> Slope:
        return slope(self, other, exact=exact)

    def slope_order(self, exact: bool = False) -> Comparator:
        """
        Comparator ordering two points by the slope they make with this point.
        Points with equal slopes compare as equal.
        """
        def compare(a: Point, b: Point) -> int:
            slope_a = slope(self, a, exact=exact)
            slope_b = slope(self, b, exact=exact)
            if slope_a < slope_b:
                return -1
            if slope_a > slope_b:
                return 1
            return 0

        return compare


@dataclass(frozen=True)
class Segment:
    p: Point
    q: Point

    def __post_init__(self):
        if self.p is None or self.q is None:
            raise TypeError('argument is None')
        if self.p == self.q:
            raise InvalidInputError(f'segment endpoints are equal: {self.p}')

    def __str__(self):
        return f'{self.p} -> {self.q}'


def slope(a: Point, b: Point, exact: bool = False) -> Slope:
    """
    Calculates slope of a line defined by points a and b.

    Horizontal lines give +0.0 and vertical lines give +inf regardless
    of the direction from a to b. The slope of a point to itself is -inf,
    so it is sorted in front of every other point.
    With `exact`, or when the quotient overflows a float,
    the general case is returned as a Fraction.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    if dx == 0 and dy == 0:
        return NEGATIVE_INF
    if dy == 0:
        return POSITIVE_ZERO
    if dx == 0:
        return POSITIVE_INF
    if exact:
        return Fraction(dy, dx)
    try:
        return dy / dx
    except OverflowError:
        # quotient beyond the float range
        return Fraction(dy, dx)


def points_from_array(points) -> list[Point]:
    """
    Convert an (n, 2) integer array or a nested sequence of pairs into points.
    """
    arr = np.asarray(points)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(f'expected an array of shape (n, 2), got {arr.shape}')
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInputError(f'expected integer coordinates, got dtype {arr.dtype}')

    log.debug(f'Converting array of {arr.shape[0]} points')
    return [Point(int(x), int(y)) for x, y in arr]

