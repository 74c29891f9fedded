# gridstep/app/config.py
#!/usr/bin/env python3
"""
Run settings for the viewer.

Each setting comes from an environment variable and can be overridden by a
--key=value flag on the command line:

    GRIDSTEP_MAP        --map=        bundled map key or path to a .json map
    GRIDSTEP_ALGO       --algo=       astar | dijkstra
    GRIDSTEP_MOVE       --move=       4 | 8
    GRIDSTEP_HEURISTIC  --heuristic=  manhattan | euclidean | octile | chebyshev
    GRIDSTEP_SPEED      --speed=      seconds between automatic ticks
    GRIDSTEP_LOG        --log=        logging level name
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from gridstep.core.algos import Algo
from gridstep.core.heuristics import Heuristic
from gridstep.core.types import Movement

ENV_PREFIX = "GRIDSTEP_"
SETTING_KEYS = {
    "map": "MAP",
    "algo": "ALGO",
    "move": "MOVE",
    "heuristic": "HEURISTIC",
    "speed": "SPEED",
    "log": "LOG",
}


@dataclass
class Settings:
    map: str = "01_open_field"
    algo: Algo = Algo.ASTAR
    movement: Movement = Movement.STRAIGHT
    heuristic: Heuristic = Heuristic.MANHATTAN
    update_speed: float = 0.2
    log_level: int = logging.INFO


def _raw_values(argv: Sequence[str], environ: Mapping[str, str]) -> dict:
    raw = {}
    for key, env_name in SETTING_KEYS.items():
        val = environ.get(ENV_PREFIX + env_name)
        if val:
            raw[key] = val
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, val = arg[2:].split("=", 1)
        if key in SETTING_KEYS:
            raw[key] = val
    return raw


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = list(argv) if argv is not None else []
    environ = environ if environ is not None else os.environ
    raw = _raw_values(argv, environ)

    s = Settings()
    if "map" in raw:
        s.map = raw["map"]
    if "algo" in raw:
        s.algo = Algo.from_name(raw["algo"])
    if "move" in raw:
        try:
            s.movement = Movement.from_connectivity(int(raw["move"]))
        except ValueError:
            raise ValueError(f"movement must be 4 or 8, got {raw['move']!r}") from None
    if "heuristic" in raw:
        s.heuristic = Heuristic.from_name(raw["heuristic"])
    if "speed" in raw:
        s.update_speed = max(0.0, float(raw["speed"]))
    if "log" in raw:
        s.log_level = _parse_level(raw["log"])
    return s
