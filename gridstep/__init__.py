# gridstep/__init__.py
from .core.types import Cell, Grid, MapError, Movement, Algorithm, InProgress, Found, NoPath, SearchStatus
from .core.heuristics import Heuristic, make_heuristic
from .core.astar import AStarAlgo
from .core.dijkstra import DijkstraAlgo
from .core.algos import Algo
from .core.maps import load_map, bundled_maps

__all__ = [
    "Cell", "Grid", "MapError", "Movement",
    "Algorithm", "InProgress", "Found", "NoPath", "SearchStatus",
    "Heuristic", "make_heuristic",
    "AStarAlgo", "DijkstraAlgo", "Algo",
    "load_map", "bundled_maps",
]
