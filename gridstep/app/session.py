# gridstep/app/session.py
#!/usr/bin/env python3
"""
Executor: drives one algorithm on one map and keeps the tick count.

Pacing is time-based but clock-agnostic: the caller passes `now` (seconds)
to update(), so the viewer can feed pygame ticks and tests can feed numbers.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from gridstep.core.algos import Algo
from gridstep.core.heuristics import Heuristic
from gridstep.core.types import Algorithm, Found, Grid, InProgress, Movement

logger = logging.getLogger(__name__)


@dataclass
class Executor:
    grid: Grid
    algo_kind: Algo = Algo.ASTAR
    movement: Movement = Movement.STRAIGHT
    heuristic: Heuristic = Heuristic.MANHATTAN
    auto_advance: bool = True
    update_speed: float = 0.2
    last_update: float = 0.0
    ticks: int = 0
    algo: Optional[Algorithm] = None

    def __post_init__(self):
        if self.algo is None:
            self.algo = self.algo_kind.create(self.grid, self.movement, self.heuristic)

    # -------------------- stepping --------------------

    def advance(self) -> None:
        if self.algo.status().terminal:
            return
        self.algo.advance()
        self.ticks += 1
        st = self.algo.status()
        if st.terminal:
            outcome = "found" if isinstance(st, Found) else "no path"
            logger.info(f"{self.algo.name} on {self.grid.name}: {outcome} after {self.ticks} ticks")

    def update(self, now: float) -> bool:
        """Advance once if auto-advancing and update_speed has elapsed."""
        if not self.auto_advance:
            return False
        if self.last_update + self.update_speed >= now:
            return False
        self.last_update = now
        self.advance()
        return True

    def step_once(self) -> None:
        self.auto_advance = False
        self.advance()

    def toggle_auto(self) -> None:
        self.auto_advance = not self.auto_advance

    def adjust_speed(self, delta: float) -> None:
        self.update_speed = max(0.0, self.update_speed + delta)

    def restart(self) -> None:
        self.algo.reset()
        self.ticks = 0

    # -------------------- text --------------------

    @property
    def algo_name(self) -> str:
        return self.algo_kind.display_name

    @property
    def heuristic_label(self) -> str:
        return self.heuristic.display_name if self.algo_kind.supports_heuristics else "N/A"

    def status_text(self) -> str:
        st = self.algo.status()
        if isinstance(st, InProgress):
            mode = f"Automatic at {self.update_speed:.1f}s" if self.auto_advance else "Manual"
            return f"{mode} | Tick {self.ticks}"
        if isinstance(st, Found):
            return f"Found: {self.ticks} ticks, Path: {len(st.path)} tiles"
        return f"Failed after {self.ticks} ticks"

    def info_text(self) -> str:
        return (f"Map: {self.grid.name}  Algo: {self.algo_name}  Diag: {self.movement.label}  "
                f"Heur: {self.heuristic_label}  |  {self.status_text()}")
