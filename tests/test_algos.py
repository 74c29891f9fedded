import pytest

from gridstep.core.algos import Algo
from gridstep.core.astar import AStarAlgo
from gridstep.core.dijkstra import DijkstraAlgo
from gridstep.core.heuristics import Heuristic
from gridstep.core.types import Algorithm, Movement
from tests.helpers import free_grid


def test_registry_metadata():
    assert Algo.count() == 2
    assert [a.display_name for a in Algo] == ["A*", "Dijkstra"]
    assert Algo.ASTAR.supports_heuristics
    assert not Algo.DIJKSTRA.supports_heuristics


def test_ordinals_are_stable():
    assert Algo.from_index(0) is Algo.ASTAR
    assert Algo.from_index(1) is Algo.DIJKSTRA
    assert [Algo.from_index(a.index) for a in Algo] == list(Algo)
    assert Algo.DIJKSTRA.next() is Algo.ASTAR


@pytest.mark.parametrize("idx", [-1, 2, 99])
def test_invalid_ordinal_fails_loudly(idx):
    with pytest.raises(IndexError):
        Algo.from_index(idx)


def test_from_name():
    assert Algo.from_name("a*") is Algo.ASTAR
    assert Algo.from_name("ASTAR") is Algo.ASTAR
    assert Algo.from_name("Dijkstra") is Algo.DIJKSTRA
    with pytest.raises(ValueError):
        Algo.from_name("bfs")


def test_create_binds_fresh_instances():
    grid = free_grid(3, 3)
    a1 = Algo.ASTAR.create(grid, Movement.DIAGONAL, Heuristic.OCTILE)
    a2 = Algo.ASTAR.create(grid, Movement.DIAGONAL, Heuristic.OCTILE)
    assert isinstance(a1, AStarAlgo) and isinstance(a1, Algorithm)
    assert a1 is not a2
    assert a1.grid is grid
    assert a1.heuristic is Heuristic.OCTILE
    assert a1.movement is Movement.DIAGONAL
    a1.advance()
    assert a2.popped_count == 0


def test_dijkstra_ignores_heuristic():
    d = Algo.DIJKSTRA.create(free_grid(3, 3), heuristic=Heuristic.EUCLIDEAN)
    assert isinstance(d, DijkstraAlgo)
    assert not hasattr(d, "heuristic")


def test_astar_defaults_to_manhattan():
    assert Algo.ASTAR.create(free_grid(2, 2)).heuristic is Heuristic.MANHATTAN


def test_contract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Algorithm()
