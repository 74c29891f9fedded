# gridstep/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass

from gridstep.core.search import GridSearch
from gridstep.core.types import Cell


@dataclass
class DijkstraAlgo(GridSearch):
    """Uniform-cost search: priority is the cost so far alone."""
    name: str = "Dijkstra"

    def _h(self, c: Cell) -> float:
        return 0
