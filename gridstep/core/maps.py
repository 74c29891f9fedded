# gridstep/core/maps.py
#!/usr/bin/env python3
"""
JSON map files.

    {
      "width": 5, "height": 3,
      "start": [0, 0],
      "targets": [[4, 2]],          # or "goal": [4, 2]
      "cells": [[0, 0, 1, 0, 0],    # cells[row][col]
                [0, 0, 1, 0, 0],
                [0, 0, 0, 0, 0]],
      "weights": {"1": "BLOCK"}     # optional: cell code -> cost or "BLOCK"
    }

Without "weights", a cell's value is its cost and negative values are walls.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from gridstep.core.types import Grid, MapError

logger = logging.getLogger(__name__)

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
BLOCK = "BLOCK"
BLOCK_COST = -1


def bundled_maps() -> Dict[str, Path]:
    """Map key -> file for every map shipped with the package, sorted by key."""
    return {p.stem: p for p in sorted(MAP_DIR.glob("*.json"))}


def _resolve_cost(v: Any, weights: Dict[str, Any]) -> Any:
    w = weights.get(str(v), v)
    if w == BLOCK:
        return BLOCK_COST
    if isinstance(w, bool) or not isinstance(w, int):
        raise MapError(f"bad weight for cell code {v!r}: {w!r}")
    return w


def grid_from_dict(data: Dict[str, Any], name: str = "custom") -> Grid:
    if not isinstance(data, dict):
        raise MapError(f"map must be a JSON object, got {type(data).__name__}")
    try:
        width = data["width"]
        height = data["height"]
        start = data["start"]
        targets = data["targets"] if "targets" in data else [data["goal"]]
        cells = data["cells"]
    except KeyError as ex:
        raise MapError(f"map is missing key {ex.args[0]!r}") from None

    weights = data.get("weights", {})
    if not isinstance(weights, dict):
        raise MapError(f"weights must be an object, got {weights!r}")
    if not isinstance(cells, list) or not all(isinstance(row, list) for row in cells):
        raise MapError(f"cells must be a list of rows, got {cells!r}")
    costs = [[_resolve_cost(v, weights) for v in row] for row in cells]
    return Grid(width, height, costs, start, targets, name)


def load_map(path: Union[str, Path]) -> Grid:
    path = Path(path)
    with open(path, "r") as f:
        data = json.load(f)
    grid = grid_from_dict(data, name=path.stem)
    logger.info(f"Loaded map {grid.name} ({grid.width}x{grid.height}, "
                f"{len(grid.targets)} target(s))")
    return grid
