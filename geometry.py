import numpy as np

from dataclasses import dataclass


# Tolerance below which a signed area is treated as zero (collinear points).
# Shared by both hull builders so their results stay comparable.
EPS = 1e-9


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def orientation(o: Point, a: Point, b: Point) -> float:
    """
    Twice the signed area of triangle oab.
    Positive for a counter-clockwise (left) turn o -> a -> b,
    negative for a clockwise one.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def cross(u: Point, v: Point) -> float:
    """
    Cross product of vectors u and v.
    """
    return u.x * v.y - u.y * v.x


def squared_distance(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def collinear(o: Point, a: Point, b: Point, tol: float = EPS) -> bool:
    """
    Collinearity check for segments [o, a] and [o, b].
    """
    return abs(orientation(o, a, b)) < tol


def order_by_centroid_angle(points: list[Point], indices: list[int]) -> list[int]:
    """
    Sort point indices by polar angle around the centroid of the points they refer to.
    The sort is stable, so indices with equal angles keep their input order.
    """
    if len(indices) <= 1:
        return list(indices)

    cx = sum(points[i].x for i in indices) / len(indices)
    cy = sum(points[i].y for i in indices) / len(indices)

    def polar_angle(i: int):
        return np.arctan2(points[i].y - cy, points[i].x - cx)

    return sorted(indices, key=polar_angle)
