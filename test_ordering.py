import pytest

from geometry import InvalidInputError, Point
from ordering import natural_order, stable_sort, validate_points


def by_first(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


def test_stable_sort():
    items = [(2, 'a'), (1, 'b'), (2, 'c'), (1, 'd'), (0, 'e')]
    assert stable_sort(items, by_first) == [(0, 'e'), (1, 'b'), (1, 'd'), (2, 'a'), (2, 'c')]
    assert items[0] == (2, 'a')


@pytest.mark.parametrize("items", [[], [(1, 'a')]])
def test_stable_sort_short(items):
    assert stable_sort(items, by_first) == items


def test_stable_sort_by_slope():
    pivot = Point(0, 0)
    later = [Point(3, 3), Point(1, 0), Point(1, 1), Point(2, 2), Point(0, 1)]
    result = stable_sort(later, pivot.slope_order())
    assert result == [Point(1, 0), Point(3, 3), Point(1, 1), Point(2, 2), Point(0, 1)]


def test_natural_order_comparator():
    assert natural_order(Point(5, 0), Point(0, 1)) == -1
    assert natural_order(Point(0, 1), Point(0, 1)) == 0


def test_validate_points_sorts_copy():
    points = [Point(4, 4), Point(1, 1), Point(3, 0)]
    result = validate_points(points)
    assert result == [Point(3, 0), Point(1, 1), Point(4, 4)]
    assert points == [Point(4, 4), Point(1, 1), Point(3, 0)]
    assert validate_points([]) == []
    assert validate_points(iter([Point(1, 1)])) == [Point(1, 1)]


@pytest.mark.parametrize("points, message", [
    (None, 'points is None'),
    ([Point(1, 1), None], 'point at index 1 is None'),
    ([Point(1, 1), (2, 2)], 'point at index 1 is not a Point'),
    ([Point(1, 1), Point(2, 5), Point(1, 1)], 'duplicate point'),
])
def test_validate_points_invalid(points, message):
    with pytest.raises(InvalidInputError, match=message):
        validate_points(points)
