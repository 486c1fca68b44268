from dataclasses import dataclass, field


class IterationCounter:
    """
    Counts units of work (primitive geometry comparisons) of one hull computation.
    Each builder run owns its counter, so two runs never share one.
    """

    def __init__(self):
        self.value: int = 0

    def tick(self, n: int = 1):
        self.value += n

    def reset(self):
        self.value = 0


@dataclass(frozen=True)
class Hull:
    """
    Hull vertices as indices into the input points, traced as a closed polygon.
    Hulls with fewer than 3 vertices are degenerate (a point or a segment).
    """
    indices: tuple[int, ...] = field(default_factory=tuple)
    iterations: int = 0

    @property
    def is_polygon(self) -> bool:
        return len(self.indices) >= 3

    def __len__(self):
        return len(self.indices)


Hull.EMPTY = Hull()


@dataclass(frozen=True)
class HullResult:
    fast_hull: tuple[int, ...] = field(default_factory=tuple)
    fast_iterations: int = 0
    slow_hull: tuple[int, ...] = field(default_factory=tuple)
    slow_iterations: int = 0

    @classmethod
    def empty(cls) -> 'HullResult':
        return cls()

    @classmethod
    def from_hulls(cls, fast: Hull, slow: Hull) -> 'HullResult':
        return cls(fast.indices, fast.iterations, slow.indices, slow.iterations)

    @property
    def fast(self) -> Hull:
        return Hull(self.fast_hull, self.fast_iterations)

    @property
    def slow(self) -> Hull:
        return Hull(self.slow_hull, self.slow_iterations)

    def vertex_sets_agree(self) -> bool:
        return set(self.fast_hull) == set(self.slow_hull)
