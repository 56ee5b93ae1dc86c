import logging

from functools import cmp_to_key
from typing import Callable, Iterable, TypeVar

from geometry import InvalidInputError, Point

log = logging.getLogger(__name__)

T = TypeVar('T')


def natural_order(a: Point, b: Point) -> int:
    return a.compare(b)


def stable_sort(items: Iterable[T], comparator: Callable[[T, T], int]) -> list[T]:
    """
    Return a new list sorted by `comparator`.
    Items comparing equal keep their relative input order.
    """
    return sorted(items, key=cmp_to_key(comparator))


def validate_points(points) -> list[Point]:
    """
    Check a point collection and return its copy sorted by natural order.

    Raises InvalidInputError if the collection or any of its points is missing,
    or if some point occurs more than once. The caller's collection is not modified.
    """
    if points is None:
        log.debug('Rejecting input: points is None')
        raise InvalidInputError('points is None')

    points = list(points)
    for i, p in enumerate(points):
        if p is None:
            log.debug(f'Rejecting input: point at index {i} is None')
            raise InvalidInputError(f'point at index {i} is None')
        if not isinstance(p, Point):
            log.debug(f'Rejecting input: point at index {i} is {type(p).__name__}')
            raise InvalidInputError(f'point at index {i} is not a Point')

    points = stable_sort(points, natural_order)
    for prev, cur in zip(points, points[1:]):
        if prev.compare(cur) == 0:
            log.debug(f'Rejecting input: duplicate point {cur}')
            raise InvalidInputError(f'duplicate point {cur}')
    return points
