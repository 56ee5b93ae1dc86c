import logging
import numpy as np

from itertools import combinations

from geometry import Point, Segment, Slope, points_from_array
from ordering import validate_points

log = logging.getLogger(__name__)


class BruteCollinearPoints:
    """
    Examines every 4 points at a time and checks whether they lie on one line.
    Used as a reference for FastCollinearPoints. Time complexity: O(n^4).
    """

    def __init__(self, points: list[Point] | np.ndarray, exact: bool = False):
        self.exact: bool = exact
        if isinstance(points, np.ndarray):
            points = points_from_array(points)
        self.points: list[Point] = validate_points(points)
        self._segments: list[Segment] = self.find_segments()

    def number_of_segments(self) -> int:
        return len(self._segments)

    def segments(self) -> list[Segment]:
        return list(self._segments)

    def collinear(self, p: Point, q: Point, r: Point, s: Point) -> Slope | None:
        """
        Common slope from p to q, r and s, or None if they differ.
        """
        k = p.slope_to(q, exact=self.exact)
        if k == p.slope_to(r, exact=self.exact) and k == p.slope_to(s, exact=self.exact):
            return k
        return None

    @staticmethod
    def find(parent: dict[Point, Point], p: Point) -> Point:
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def find_segments(self) -> list[Segment]:
        log.debug(f'Checking all quadruples of {len(self.points)} points')

        # collinear quadruples with one slope that share a point lie on one line,
        # so each line is a connected component in the graph of its slope
        parents: dict[Slope, dict[Point, Point]] = {}
        for quadruple in combinations(self.points, 4):
            k = self.collinear(*quadruple)
            if k is None:
                continue
            parent = parents.setdefault(k, {})
            roots = []
            for p in quadruple:
                parent.setdefault(p, p)
                roots.append(self.find(parent, p))
            for root in roots[1:]:
                parent[root] = roots[0]

        segments = []
        for parent in parents.values():
            lines: dict[Point, list[Point]] = {}
            for p in parent:
                lines.setdefault(self.find(parent, p), []).append(p)
            segments.extend(Segment(min(line), max(line)) for line in lines.values())

        log.debug(f'Found {len(segments)} segments')
        return segments
