# gridstep/core/algos.py
#!/usr/bin/env python3
"""Closed registry of the available search strategies."""

from enum import Enum
from typing import Optional

from gridstep.core.astar import AStarAlgo
from gridstep.core.dijkstra import DijkstraAlgo
from gridstep.core.heuristics import Heuristic
from gridstep.core.types import Algorithm, Grid, Movement


class Algo(Enum):
    ASTAR = ("A*", True)
    DIJKSTRA = ("Dijkstra", False)

    def __init__(self, display_name: str, supports_heuristics: bool):
        self.display_name = display_name
        self.supports_heuristics = supports_heuristics

    @classmethod
    def count(cls) -> int:
        return len(cls.__members__)

    @classmethod
    def from_index(cls, idx: int) -> "Algo":
        members = list(cls)
        if not 0 <= idx < len(members):
            raise IndexError(f"Invalid index: {idx}")
        return members[idx]

    @classmethod
    def from_name(cls, name: str) -> "Algo":
        key = name.strip().lower()
        for algo in cls:
            if key in (algo.name.lower(), algo.display_name.lower()):
                return algo
        choices = ", ".join(a.name.lower() for a in cls)
        raise ValueError(f"unknown algorithm {name!r} (choose from {choices})")

    @property
    def index(self) -> int:
        return list(type(self)).index(self)

    def next(self) -> "Algo":
        return Algo.from_index((self.index + 1) % Algo.count())

    def create(self, grid: Grid, movement: Movement = Movement.STRAIGHT,
               heuristic: Optional[Heuristic] = None) -> Algorithm:
        """Fresh instance bound to grid; heuristic is ignored where unsupported."""
        if self is Algo.ASTAR:
            return AStarAlgo(grid, movement=movement, heuristic=heuristic or Heuristic.MANHATTAN)
        return DijkstraAlgo(grid, movement=movement)
