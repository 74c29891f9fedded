# gridstep/core/astar.py
#!/usr/bin/env python3
"""
A*: one expansion per advance() for animation.

Priority is g + h, where h is the distance to the nearest target under the
configured Heuristic. The result is optimal when h is admissible; Manhattan
is not admissible with diagonal movement, so that pairing is logged.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from gridstep.core.heuristics import Heuristic, make_heuristic
from gridstep.core.search import GridSearch
from gridstep.core.types import Cell, Movement

logger = logging.getLogger(__name__)


@dataclass
class AStarAlgo(GridSearch):
    name: str = "A*"
    heuristic: Heuristic = Heuristic.MANHATTAN
    _hfun: Callable[[Cell], float] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        self._hfun = make_heuristic(self.heuristic, self.grid.targets)
        if self.movement is Movement.DIAGONAL and not self.heuristic.admissible_for_diagonal():
            logger.warning(f"{self.heuristic.display_name} heuristic overestimates with diagonal "
                           f"movement; A* paths may be suboptimal")
        super().__post_init__()

    def _h(self, c: Cell) -> float:
        return self._hfun(c)
