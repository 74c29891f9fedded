# gridstep/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates for A*.

Every step costs at least 1 (orthogonal) or sqrt(2) (diagonal), so:
- Manhattan is admissible for 4-connected movement only.
- Euclidean, Octile and Chebyshev stay admissible for 8-connected movement.
"""

from enum import Enum
from math import hypot, sqrt
from typing import Callable, Iterable

from gridstep.core.types import Cell

DIAGONAL_FACTOR = sqrt(2)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Cell, b: Cell) -> float:
    return hypot(a[0] - b[0], a[1] - b[1])


def octile(a: Cell, b: Cell) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + (DIAGONAL_FACTOR - 1) * min(dx, dy)


def chebyshev(a: Cell, b: Cell) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


class Heuristic(Enum):
    MANHATTAN = ("Manhattan", manhattan)
    EUCLIDEAN = ("Euclidean", euclidean)
    OCTILE = ("Octile", octile)
    CHEBYSHEV = ("Chebyshev", chebyshev)

    def __init__(self, display_name: str, distance: Callable[[Cell, Cell], float]):
        self.display_name = display_name
        self.distance = distance

    @classmethod
    def count(cls) -> int:
        return len(cls.__members__)

    @classmethod
    def from_index(cls, idx: int) -> "Heuristic":
        members = list(cls)
        if not 0 <= idx < len(members):
            raise IndexError(f"Invalid heuristic index: {idx}")
        return members[idx]

    @classmethod
    def from_name(cls, name: str) -> "Heuristic":
        key = name.strip().upper()
        if key not in cls.__members__:
            choices = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"unknown heuristic {name!r} (choose from {choices})")
        return cls[key]

    @property
    def index(self) -> int:
        return list(type(self)).index(self)

    def next(self) -> "Heuristic":
        return Heuristic.from_index((self.index + 1) % Heuristic.count())

    def admissible_for_diagonal(self) -> bool:
        return self is not Heuristic.MANHATTAN


def make_heuristic(kind: Heuristic, targets: Iterable[Cell]) -> Callable[[Cell], float]:
    """h(c) = distance to the nearest target."""
    goals = tuple(targets)
    dist = kind.distance

    def h(c: Cell) -> float:
        return min(dist(c, t) for t in goals)

    return h
