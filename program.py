import argparse
import logging
import math
import os
import sys
import time

import numpy as np

from convex_hull_graham import GrahamHullBuilder
from convex_hull_naive import NaiveHullBuilder
from geometry import EPS, Point
from hull_session import HullSession

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file: the number of points on the first line,
    then one "x y" pair per line.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f"Bad point count {header!r} in {filename}") from None
        if n < 0:
            raise ValueError(f"Bad point count {n} in {filename}")

        for line_no in range(2, n + 2):
            line = f.readline()
            if not line:
                raise ValueError(f"{filename}: expected {n} points, got {len(points)}")
            try:
                x, y = map(float, line.split())
            except ValueError:
                raise ValueError(f"{filename}:{line_no}: cannot parse point {line.strip()!r}") from None
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(f"{filename}:{line_no}: coordinates must be finite")
            points.append(Point(x, y))
    return points


def generate_random_points(n: int, distribution: str, seed: int = 42) -> list[Point]:
    np.random.seed(seed)
    points = []

    if distribution == "uniform":
        points = [Point(np.random.uniform(0, 1000), np.random.uniform(0, 1000))
                  for _ in range(n)]
    elif distribution == "circle":
        for _ in range(n):
            angle = np.random.uniform(0, 2 * np.pi)
            r = np.random.uniform(0, 500) ** 0.5
            points.append(Point(500 + r * np.cos(angle), 500 + r * np.sin(angle)))
    elif distribution == "gaussian":
        points = [Point(np.random.normal(500, 150), np.random.normal(500, 150))
                  for _ in range(n)]
    elif distribution == "clusters":
        n_clusters = 5
        points_per_cluster = n // n_clusters
        for _ in range(n_clusters):
            cx = np.random.uniform(100, 900)
            cy = np.random.uniform(100, 900)
            for _ in range(points_per_cluster):
                points.append(Point(np.random.normal(cx, 50), np.random.normal(cy, 50)))
    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    return [Point(float(pt.x), float(pt.y)) for pt in points]


def compare_algorithms(points: list[Point], eps: float = EPS) -> dict[str, float]:
    """
    Wall clock seconds taken by each algorithm on the same points.
    """
    timings = {}
    for name, builder in (("fast", GrahamHullBuilder(eps=eps)), ("slow", NaiveHullBuilder(eps=eps))):
        start = time.perf_counter()
        builder.compute_hull(points)
        timings[name] = time.perf_counter() - start
    return timings


def generate_report(session: HullSession, source: str, timings: dict[str, float] | None = None) -> str:
    result = session.result
    fast, slow = result.fast, result.slow
    report = f"""{'='*60}
CONVEX HULL COMPARISON
{'='*60}

Source: {source}
Points: {len(session.points)}

Fast (Graham) hull: {list(fast.indices)}
  vertices:   {len(fast)}
  polygon:    {'yes' if fast.is_polygon else 'no'}
  iterations: {fast.iterations}

Slow (brute) hull: {list(slow.indices)}
  vertices:   {len(slow)}
  polygon:    {'yes' if slow.is_polygon else 'no'}
  iterations: {slow.iterations}

Vertex sets agree: {'yes' if result.vertex_sets_agree() else 'no'}
"""
    if timings:
        report += "\nTIMINGS:\n--------\n"
        for name, seconds in timings.items():
            speed = len(session.points) / seconds if seconds > 0 else float('inf')
            report += f"{name:>5}: {seconds:.6f} sec ({speed:.0f} points/sec)\n"

    report += f"{'='*60}\n"
    return report


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the convex hull of 2D points with the Graham scan and a brute force algorithm.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="points file: count on the first line, then 'x y' per line")
    source.add_argument("--generate", type=int, metavar="N", help="generate N random points instead")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--eps", type=float, default=EPS, help="collinearity tolerance")
    parser.add_argument("--parallel", action="store_true", help="run both algorithms concurrently")
    parser.add_argument("--compare", action="store_true", help="time both algorithms")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.generate is not None:
        points = generate_random_points(args.generate, args.distribution, seed=args.seed)
        source = f"generated_{args.distribution}_{args.generate}"
    else:
        try:
            points = load_points(args.file)
        except (OSError, ValueError) as e:
            logger.error("Cannot load points: %s", e)
            return 1
        source = os.path.basename(args.file)
    logger.info("Loaded %d points from %s", len(points), source)

    session = HullSession(eps=args.eps, parallel=args.parallel)
    session.run_both_algorithms(points)

    timings = compare_algorithms(session.points, eps=args.eps) if args.compare else None
    print(generate_report(session, source, timings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
