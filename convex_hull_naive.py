import logging

from geometry import EPS, Point, orientation, order_by_centroid_angle, squared_distance
from hull_result import Hull, IterationCounter

logger = logging.getLogger(__name__)


class NaiveHullBuilder:
    def __init__(self, eps: float = EPS):
        self.eps: float = eps

    def sides(self, points: list[Point], i: int, j: int, counter: IterationCounter) -> tuple[bool, bool]:
        """
        Find whether other points lie strictly left and strictly right of the line (i, j).
        Points on the line itself count for neither side.
        Stops as soon as both sides are occupied.
        """
        pos = neg = False
        for k in range(len(points)):
            if k == i or k == j:
                continue
            counter.tick()
            c = orientation(points[i], points[j], points[k])
            if c > self.eps:
                pos = True
            elif c < -self.eps:
                neg = True
            if pos and neg:
                break
        return pos, neg

    @staticmethod
    def extremes(points: list[Point], vertices: list[int]) -> list[int]:
        """
        Two farthest apart vertices of a collinear set,
        or the first vertex when all of them coincide.
        """
        best, best_dist = vertices[:1], 0.0
        for a, i in enumerate(vertices):
            for j in vertices[a + 1:]:
                d = squared_distance(points[i], points[j])
                if d > best_dist:
                    best, best_dist = [i, j], d
        return best

    def compute_hull(self, points: list[Point], counter: IterationCounter | None = None) -> Hull:
        """
        Convex hull by testing every pair of points for being a hull edge.
        Hull vertices are the endpoints of all accepted edges,
        ordered by polar angle around their centroid.

        Fully collinear (or coincident) input is reduced to its extreme points.

        Time complexity: O(n^3).
        """
        if counter is None:
            counter = IterationCounter()
        counter.reset()

        if len(points) < 3:
            return Hull.EMPTY

        edges = set()
        # becomes true once any point is seen strictly off a tested line
        has_area = False
        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                if squared_distance(points[i], points[j]) == 0:
                    # coincident points do not define a line
                    continue
                pos, neg = self.sides(points, i, j, counter)
                has_area = has_area or pos or neg
                if not (pos and neg):
                    edges.add((i, j))
                    edges.add((j, i))

        vertices = sorted({v for edge in edges for v in edge})
        logger.debug('%d edges accepted, %d hull vertices', len(edges) // 2, len(vertices))
        if not has_area:
            vertices = self.extremes(points, list(range(len(points))))
        if not vertices:
            return Hull((), counter.value)

        return Hull(tuple(order_by_centroid_angle(points, vertices)), counter.value)
