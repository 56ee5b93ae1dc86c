import logging
import numpy as np

from geometry import Point, Segment, Slope, points_from_array
from ordering import stable_sort, validate_points

log = logging.getLogger(__name__)


class FastCollinearPoints:
    """
    Finds every maximal line segment containing 4 or more of the given points.

    Each point in natural order is taken as a pivot, the points after it
    are sorted by the slope they make with the pivot, and runs of equal
    slope are collected. Time complexity: O(n^2*log(n)).
    """
    min_run: int = 3

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

    def earlier_slopes(self, i: int) -> set[Slope]:
        """
        Slopes from points[i] to every point before it.
        A run on one of these slopes belongs to a line which starts
        at an earlier pivot and has already been reported.
        """
        pivot = self.points[i]
        return {pivot.slope_to(p, exact=self.exact) for p in self.points[:i]}

    def runs(self, pivot: Point, later: list[Point]) -> list[list[Point]]:
        """
        Split points sorted by slope to the pivot into runs of equal slope.
        """
        runs = []
        run = []
        run_slope = None
        for p in later:
            k = pivot.slope_to(p, exact=self.exact)
            if run and k == run_slope:
                run.append(p)
                continue
            if run:
                runs.append(run)
            run = [p]
            run_slope = k
        if run:
            runs.append(run)
        return runs

    def find_segments(self) -> list[Segment]:
        n = len(self.points)
        log.debug(f'Searching collinear points among {n} points')

        segments = []
        for i in range(n - self.min_run):
            pivot = self.points[i]
            # only points after the pivot, already in natural order,
            # so ties stay sorted and run[-1] is the far endpoint
            later = stable_sort(self.points[i + 1:], pivot.slope_order(exact=self.exact))
            assert pivot not in later

            seen = None
            for run in self.runs(pivot, later):
                if len(run) < self.min_run:
                    continue
                if seen is None:
                    seen = self.earlier_slopes(i)
                if pivot.slope_to(run[0], exact=self.exact) in seen:
                    continue
                segment = Segment(pivot, run[-1])
                log.debug(f'Found segment {segment} through {len(run) + 1} points')
                segments.append(segment)

        log.debug(f'Found {len(segments)} segments')
        return segments
