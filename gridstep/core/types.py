# gridstep/core/types.py
#!/usr/bin/env python3
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Tuple, Union

Cell = Tuple[int, int]  # (col, row) == (x, y)


class MapError(ValueError):
    """Raised when a grid map violates its construction invariants."""


class Movement(Enum):
    STRAIGHT = (4, "Off")
    DIAGONAL = (8, "On")

    def __init__(self, connectivity: int, label: str):
        self.connectivity = connectivity
        self.label = label

    @classmethod
    def from_connectivity(cls, value: int) -> "Movement":
        for m in cls:
            if m.connectivity == value:
                return m
        raise ValueError(f"movement must be 4 or 8, got {value!r}")

    def toggled(self) -> "Movement":
        return Movement.DIAGONAL if self is Movement.STRAIGHT else Movement.STRAIGHT


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _as_cell(value: Any, what: str) -> Cell:
    try:
        x, y = value
    except (TypeError, ValueError):
        raise MapError(f"{what} must be an [x, y] pair, got {value!r}") from None
    if not (_is_int(x) and _is_int(y)):
        raise MapError(f"{what} coordinates must be integers, got {value!r}")
    return (x, y)


def _as_rows(cells: Any) -> Tuple[Tuple[int, ...], ...]:
    try:
        rows = tuple(tuple(row) for row in cells)
    except TypeError:
        raise MapError(f"cells must be a list of rows, got {cells!r}") from None
    for row in rows:
        for v in row:
            if not _is_int(v):
                raise MapError(f"cell costs must be integers, got {v!r}")
    return rows


@dataclass(frozen=True)
class Grid:
    """
    Immutable map shared by the running algorithm and the renderer.

    cells[row][col] holds the configured cost of each cell:
      < 0  -> obstacle
      >= 0 -> traversable; entering it costs max(1, cost)
    """
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]
    start: Cell
    targets: FrozenSet[Cell]
    name: str = "custom"

    def __post_init__(self):
        if not (_is_int(self.width) and _is_int(self.height)):
            raise MapError(f"grid dimensions must be integers, got {self.width!r}x{self.height!r}")
        if self.width <= 0 or self.height <= 0:
            raise MapError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        rows = _as_rows(self.cells)
        if len(rows) != self.height or any(len(r) != self.width for r in rows):
            raise MapError("cells size mismatch")
        try:
            targets = frozenset(_as_cell(t, "target") for t in self.targets)
        except TypeError:
            raise MapError(f"targets must be a list of [x, y] pairs, got {self.targets!r}") from None
        object.__setattr__(self, "cells", rows)
        object.__setattr__(self, "start", _as_cell(self.start, "start"))
        object.__setattr__(self, "targets", targets)

        if not self.in_bounds(self.start):
            raise MapError(f"start {self.start} out of bounds")
        if self.is_block(self.start):
            raise MapError(f"start {self.start} is an obstacle")
        if not self.targets:
            raise MapError("at least one target is required")
        for t in self.targets:
            if not self.in_bounds(t):
                raise MapError(f"target {t} out of bounds")
            if self.is_block(t):
                raise MapError(f"target {t} is an obstacle")

    @classmethod
    def build(cls, cells: Iterable[Iterable[int]], start: Cell,
              targets: Iterable[Cell], name: str = "custom") -> "Grid":
        """Infer width/height from a row-major cost array."""
        rows = [list(r) for r in cells]
        width = len(rows[0]) if rows else 0
        return cls(width, len(rows), rows, start, tuple(targets), name)

    # -------------------- accessors --------------------

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def cost_at(self, c: Cell) -> int:
        """Raw configured cost. Out-of-bounds lookups fail, they never clamp."""
        if not self.in_bounds(c):
            raise IndexError(f"cell {c} outside {self.width}x{self.height} grid")
        x, y = c
        return self.cells[y][x]

    def is_block(self, c: Cell) -> bool:
        return self.cost_at(c) < 0

    def step_cost(self, c: Cell) -> int:
        """Cost of entering c with an orthogonal move."""
        v = self.cost_at(c)
        if v < 0:
            raise ValueError("Asked cost of a BLOCK cell")
        return max(1, v)

    def is_target(self, c: Cell) -> bool:
        return c in self.targets

    def free_cells(self) -> int:
        return sum(1 for row in self.cells for v in row if v >= 0)


# -------------------- search status --------------------

@dataclass(frozen=True)
class InProgress:
    opened: FrozenSet[Cell] = field(default_factory=frozenset)
    closed: FrozenSet[Cell] = field(default_factory=frozenset)

    @property
    def terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Found:
    path: Tuple[Cell, ...]
    closed: FrozenSet[Cell]
    cost: float = 0

    @property
    def terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class NoPath:
    closed: FrozenSet[Cell] = field(default_factory=frozenset)

    @property
    def terminal(self) -> bool:
        return True


SearchStatus = Union[InProgress, Found, NoPath]



class Algorithm(ABC):
    """
    Step-wise search contract consumed by drivers and renderers.

    advance() does one bounded unit of work and returns nothing;
    status() reports the outcome of the most recent advance().
    """
    name: str

    @abstractmethod
    def advance(self) -> None:
        ...

    @abstractmethod
    def status(self) -> SearchStatus:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def metrics(self) -> Dict[str, Any]:
        ...
