# tests/helpers.py
from gridstep.core.types import Algorithm, Grid


def make_grid(rows, start=(0, 0), targets=((0, 0),)):
    return Grid.build(rows, start, targets)


def free_grid(w, h, start=(0, 0), targets=None):
    targets = targets or [(w - 1, h - 1)]
    return Grid.build([[0] * w for _ in range(h)], start, targets)


def run_to_end(algo: Algorithm, limit: int = 10_000) -> int:
    """Advance until terminal; returns the number of advance() calls."""
    ticks = 0
    while not algo.status().terminal:
        algo.advance()
        ticks += 1
        assert ticks <= limit, "search did not terminate"
    return ticks


def adjacent(a, b, diagonal: bool) -> bool:
    dx, dy = abs(a[0] - b[0]), abs(a[1] - b[1])
    if diagonal:
        return max(dx, dy) == 1
    return dx + dy == 1
