import logging
import math

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from convex_hull_graham import GrahamHullBuilder
from convex_hull_naive import NaiveHullBuilder
from geometry import EPS, Point
from hull_result import HullResult, IterationCounter

logger = logging.getLogger(__name__)


def as_points(points: Iterable[Point | tuple[float, float]]) -> list[Point]:
    return [
        Point(float(pt.x), float(pt.y)) if isinstance(pt, Point) else Point(float(pt[0]), float(pt[1]))
        for pt in points
    ]


def run_both(
    points: Iterable[Point | tuple[float, float]],
    eps: float = EPS,
    parallel: bool = False,
) -> HullResult:
    """
    Compute the hull of the same points with both the fast (Graham scan)
    and the slow (brute force) algorithm.

    Fewer than 3 points give empty hulls and zero counters without
    running either algorithm. The two runs share nothing but the
    read-only input, so with `parallel` they run on two threads.
    """
    points = as_points(points)
    if len(points) < 3:
        logger.info('%d points, nothing to do', len(points))
        return HullResult.empty()

    fast_builder = GrahamHullBuilder(eps=eps)
    slow_builder = NaiveHullBuilder(eps=eps)
    fast_counter = IterationCounter()
    slow_counter = IterationCounter()

    if parallel:
        with ThreadPoolExecutor(max_workers=2) as pool:
            fast_future = pool.submit(fast_builder.compute_hull, points, fast_counter)
            slow_future = pool.submit(slow_builder.compute_hull, points, slow_counter)
            fast, slow = fast_future.result(), slow_future.result()
    else:
        fast = fast_builder.compute_hull(points, fast_counter)
        slow = slow_builder.compute_hull(points, slow_counter)

    logger.info(
        '%d points: fast hull %d vertices in %d iterations, slow hull %d vertices in %d iterations',
        len(points), len(fast), fast.iterations, len(slow), slow.iterations,
    )
    return HullResult.from_hulls(fast, slow)


class HullSession:
    """
    Point set collected from user input together with the latest hulls computed over it.
    """

    def __init__(self, eps: float = EPS, parallel: bool = False):
        self.eps = eps
        self.parallel = parallel
        self.points: list[Point] = []
        self.result: HullResult = HullResult.empty()

    def add_point(self, x: float, y: float) -> int:
        """
        Append a point and drop the hulls computed so far.
        Returns the index of the new point.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f'Point coordinates must be finite, got ({x}, {y})')
        self.points.append(Point(float(x), float(y)))
        self.result = HullResult.empty()
        return len(self.points) - 1

    def run_both_algorithms(self, points: Iterable[Point | tuple[float, float]] | None = None) -> HullResult:
        if points is not None:
            self.points = as_points(points)
        self.result = HullResult.empty()
        self.result = run_both(tuple(self.points), eps=self.eps, parallel=self.parallel)
        return self.result

    def clear_all(self):
        self.points = []
        self.result = HullResult.empty()
