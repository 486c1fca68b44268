import logging

from functools import cmp_to_key

from geometry import EPS, Point, collinear, cross, orientation, squared_distance
from hull_result import Hull, IterationCounter

logger = logging.getLogger(__name__)


class GrahamHullBuilder:
    def __init__(self, eps: float = EPS):
        self.eps: float = eps

    @staticmethod
    def find_pivot(points: list[Point], counter: IterationCounter) -> int:
        """
        Index of the lowest point, the leftmost one among equally low points.
        """
        pivot = 0
        for i in range(1, len(points)):
            counter.tick()
            p, q = points[i], points[pivot]
            if p.y < q.y or (p.y == q.y and p.x < q.x):
                pivot = i
        return pivot

    def sort_by_angle(self, points: list[Point], pivot: int, counter: IterationCounter) -> list[int]:
        """
        Sort all indices by polar angle around the pivot, pivot first.
        Points on the same ray from the pivot go nearest first.
        """
        p0 = points[pivot]

        def compare(a: int, b: int) -> int:
            counter.tick()
            va = Point(points[a].x - p0.x, points[a].y - p0.y)
            vb = Point(points[b].x - p0.x, points[b].y - p0.y)
            cr = cross(va, vb)
            if abs(cr) < self.eps:
                da = squared_distance(p0, points[a])
                db = squared_distance(p0, points[b])
                return -1 if da < db else int(da > db)
            return -1 if cr > 0 else 1

        others = [i for i in range(len(points)) if i != pivot]
        return [pivot] + sorted(others, key=cmp_to_key(compare))

    def reduce_collinear(self, points: list[Point], order: list[int], counter: IterationCounter) -> list[int]:
        """
        Keep only the farthest point of every run of points lying on one ray from the pivot.
        Points coinciding with the pivot are dropped.
        """
        pivot = order[0]
        p0 = points[pivot]
        filtered = [pivot]
        for i in order[1:]:
            if squared_distance(p0, points[i]) == 0:
                continue
            if len(filtered) == 1:
                filtered.append(i)
                continue

            counter.tick()
            last = filtered[-1]
            if collinear(p0, points[last], points[i], tol=self.eps):
                if squared_distance(p0, points[last]) < squared_distance(p0, points[i]):
                    filtered[-1] = i
            else:
                filtered.append(i)
        return filtered

    def sweep(self, points: list[Point], filtered: list[int], counter: IterationCounter) -> list[int]:
        """
        Walk the angle-sorted points keeping a stack of strict left turns.
        A turn counts as a left turn only when its orientation exceeds eps,
        so nearly collinear middle points are popped like exactly collinear ones.
        """
        stack = filtered[:2]
        for i in filtered[2:]:
            while len(stack) >= 2:
                counter.tick()
                # collinear turns are popped as well, only corners stay on the hull
                if orientation(points[stack[-2]], points[stack[-1]], points[i]) > self.eps:
                    break
                stack.pop()
            stack.append(i)
        return stack

    def compute_hull(self, points: list[Point], counter: IterationCounter | None = None) -> Hull:
        """
        Convex hull by angular sweep around the lowest point (Graham scan).
        Returns vertices counter-clockwise starting at the pivot.
        Time complexity: O(n*log(n)).
        """
        if counter is None:
            counter = IterationCounter()
        counter.reset()

        if len(points) < 3:
            return Hull.EMPTY

        pivot = self.find_pivot(points, counter)
        order = self.sort_by_angle(points, pivot, counter)
        filtered = self.reduce_collinear(points, order, counter)
        logger.debug('pivot %d, %d of %d points left after collinear reduction', pivot, len(filtered), len(points))

        if len(filtered) < 3:
            # everything is collinear or coincident
            return Hull(tuple(filtered), counter.value)

        hull = self.sweep(points, filtered, counter)
        return Hull(tuple(hull), counter.value)
