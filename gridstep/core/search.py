# gridstep/core/search.py
#!/usr/bin/env python3
"""
Best-first grid search, one expansion per advance() for animation.

Shared by A* and Dijkstra; subclasses only supply the heuristic term _h().

Priority queue entries are (g + h, seq, g, cell):
- lower estimate first, then FIFO by seq (earliest push wins).
- an improved cost pushes a fresh entry; the superseded one is skipped
  when it surfaces (its g no longer matches, or the cell is closed).

Step costs:
- orthogonal move into n: max(1, cost(n))
- diagonal move into n:   max(1, cost(n)) * sqrt(2)
A diagonal move is only allowed when both orthogonal cells it passes
between are free, so paths never cut a wall corner.
"""

import heapq
import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from math import inf
from typing import Dict, Iterator, List, Optional, Set, Tuple

from gridstep.core.heuristics import DIAGONAL_FACTOR
from gridstep.core.types import (
    Algorithm, Cell, Found, Grid, InProgress, Movement, NoPath, SearchStatus,
)

logger = logging.getLogger(__name__)

ORTHOGONAL_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_STEPS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass
class GridSearch(Algorithm):
    grid: Grid
    movement: Movement = Movement.STRAIGHT
    name: str = "search"

    # Internal state
    open_pq: List[Tuple[float, int, float, Cell]] = field(default_factory=list, init=False, repr=False)
    open_set: Set[Cell] = field(default_factory=set, init=False, repr=False)
    closed_set: Set[Cell] = field(default_factory=set, init=False, repr=False)
    g: Dict[Cell, float] = field(default_factory=dict, init=False, repr=False)
    parent: Dict[Cell, Cell] = field(default_factory=dict, init=False, repr=False)
    popped_count: int = field(default=0, init=False)
    seq: int = field(default=0, init=False, repr=False)
    _final: Optional[SearchStatus] = field(default=None, init=False, repr=False)
    _snapshot: Optional[SearchStatus] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.reset()

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.seq = 0
        self._final = None
        self._snapshot = None

        s = self.grid.start
        self.g[s] = 0
        self._push(s)

    # -------------------- helpers --------------------

    @abstractmethod
    def _h(self, c: Cell) -> float:
        """Estimated remaining cost from c to the nearest target."""

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, c: Cell) -> None:
        g_c = self.g[c]
        heapq.heappush(self.open_pq, (g_c + self._h(c), self._bump(), g_c, c))
        self.open_set.add(c)

    def _pop_open(self) -> Optional[Cell]:
        while self.open_pq:
            _, _, g_u, u = heapq.heappop(self.open_pq)
            if u in self.closed_set or g_u != self.g[u]:
                continue
            return u
        return None

    def neighbors(self, c: Cell) -> Iterator[Tuple[Cell, float]]:
        """Yield (neighbor, step cost) for every legal move out of c."""
        grid = self.grid
        x, y = c
        for dx, dy in ORTHOGONAL_STEPS:
            n = (x + dx, y + dy)
            if grid.in_bounds(n) and not grid.is_block(n):
                yield n, grid.step_cost(n)

        if self.movement is not Movement.DIAGONAL:
            return
        for dx, dy in DIAGONAL_STEPS:
            n = (x + dx, y + dy)
            if not grid.in_bounds(n) or grid.is_block(n):
                continue
            if grid.is_block((x + dx, y)) or grid.is_block((x, y + dy)):
                continue  # corner
            yield n, grid.step_cost(n) * DIAGONAL_FACTOR

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        path: List[Cell] = [end]
        cur = end
        while cur != self.grid.start:
            cur = self.parent[cur]
            path.append(cur)
        path.reverse()
        return path

    # -------------------- main stepping logic --------------------

    def advance(self) -> None:
        """
        Run ONE expansion step:
          - Pop the lowest-priority open node and close it.
          - If it is a target, reconstruct the path and finish.
          - Else relax its neighbors.
        Once Found/NoPath is reached, further calls do nothing.
        """
        if self._final is not None:
            return
        self._snapshot = None

        u = self._pop_open()
        if u is None:
            self._final = NoPath(closed=frozenset(self.closed_set))
            logger.debug(f"{self.name}: no path after {self.popped_count} pops")
            return

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        if self.grid.is_target(u):
            path = self._reconstruct_path(u)
            self._final = Found(tuple(path), frozenset(self.closed_set), self.g[u])
            logger.debug(f"{self.name}: reached {u} after {self.popped_count} pops, "
                         f"cost={self.g[u]:.3f} len={len(path)}")
            return

        for v, step_cost in self.neighbors(u):
            if v in self.closed_set:
                continue
            alt = self.g[u] + step_cost
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                self._push(v)

    def status(self) -> SearchStatus:
        if self._final is not None:
            return self._final
        if self._snapshot is None:
            self._snapshot = InProgress(frozenset(self.open_set), frozenset(self.closed_set))
        return self._snapshot

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        st = self.status()
        found = isinstance(st, Found)
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": len(st.path) if found else 0,
            "total_cost": st.cost if found else None,
        }
