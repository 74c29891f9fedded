import dataclasses

import pytest

from gridstep.core.types import Grid, MapError
from tests.helpers import make_grid


def test_build_infers_dimensions_and_freezes_layout():
    g = make_grid([[0, 1, 2], [3, -1, 0]], start=(0, 0), targets=[(2, 1)])
    assert (g.width, g.height) == (3, 2)
    assert g.cells == ((0, 1, 2), (3, -1, 0))
    assert g.targets == frozenset({(2, 1)})


def test_cost_lookup_is_row_major():
    g = make_grid([[0, 1, 2], [3, -1, 7]], targets=[(2, 1)])
    assert g.cost_at((2, 1)) == 7
    assert g.cost_at((0, 1)) == 3


def test_cost_lookup_out_of_bounds_fails():
    g = make_grid([[0, 0], [0, 0]], targets=[(1, 1)])
    with pytest.raises(IndexError):
        g.cost_at((2, 0))
    with pytest.raises(IndexError):
        g.cost_at((0, -1))


def test_step_cost_has_floor_of_one():
    g = make_grid([[0, 1, 4]], targets=[(2, 0)])
    assert g.step_cost((0, 0)) == 1
    assert g.step_cost((1, 0)) == 1
    assert g.step_cost((2, 0)) == 4


def test_step_cost_of_obstacle_raises():
    g = make_grid([[0, -1, 0]], targets=[(2, 0)])
    assert g.is_block((1, 0))
    with pytest.raises(ValueError):
        g.step_cost((1, 0))


def test_free_cells_and_targets():
    g = make_grid([[0, -1], [-5, 2]], targets=[(1, 1)])
    assert g.free_cells() == 2
    assert g.is_target((1, 1))
    assert not g.is_target((0, 0))


def test_grid_is_immutable():
    g = make_grid([[0, 0]], targets=[(1, 0)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.start = (1, 0)


@pytest.mark.parametrize("start,targets", [
    ((5, 0), [(1, 0)]),       # start out of bounds
    ((1, 0), [(0, 0)]),       # start on obstacle
    ((0, 0), [(1, 0)]),       # target on obstacle
    ((0, 0), [(0, 3)]),       # target out of bounds
    ((0, 0), []),             # no targets
])
def test_invalid_start_or_targets_rejected(start, targets):
    with pytest.raises(MapError):
        make_grid([[0, -1, 0]], start=start, targets=targets)


def test_non_positive_dimensions_rejected():
    with pytest.raises(MapError):
        Grid(0, 1, [], (0, 0), frozenset({(0, 0)}))


def test_ragged_cells_rejected():
    with pytest.raises(MapError):
        Grid(2, 2, [[0, 0], [0]], (0, 0), frozenset({(1, 0)}))


def test_map_error_is_value_error():
    assert issubclass(MapError, ValueError)


def test_build_accepts_list_coordinates():
    g = Grid.build([[0, 0]], [0, 0], [[1, 0]])
    assert g.start == (0, 0)
    assert g.targets == frozenset({(1, 0)})


@pytest.mark.parametrize("start,targets", [
    ((0.0, 0), [(1, 0)]),
    ((True, 0), [(1, 0)]),
    ((0, 0), [(1,)]),
    ((0, 0), 4),
])
def test_malformed_coordinates_rejected(start, targets):
    with pytest.raises(MapError):
        Grid(2, 1, [[0, 0]], start, targets)


def test_non_integer_costs_rejected():
    with pytest.raises(MapError):
        Grid(2, 1, [[0, 0.5]], (0, 0), frozenset({(1, 0)}))
    with pytest.raises(MapError):
        Grid(2, 1, 9, (0, 0), frozenset({(1, 0)}))
