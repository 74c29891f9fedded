import pytest

from gridstep.app.session import Executor
from gridstep.core.algos import Algo
from gridstep.core.heuristics import Heuristic
from gridstep.core.maps import bundled_maps, load_map
from gridstep.core.types import Movement
from tests.helpers import free_grid


def _executor(**kw):
    return Executor(free_grid(3, 3), **kw)


def test_update_respects_interval():
    ex = _executor(update_speed=0.2)
    assert not ex.update(0.1)
    assert ex.update(0.3)
    assert not ex.update(0.4)
    assert ex.update(0.6)
    assert ex.ticks == 2


def test_manual_mode_ignores_clock():
    ex = _executor()
    ex.step_once()
    assert not ex.auto_advance
    assert ex.ticks == 1
    assert not ex.update(100.0)
    ex.toggle_auto()
    assert ex.update(100.0)


def test_ticks_stop_at_terminal_status():
    ex = _executor()
    for _ in range(50):
        ex.advance()
    assert ex.algo.status().terminal
    assert ex.ticks == ex.algo.popped_count


def test_status_text_lifecycle():
    ex = _executor(update_speed=0.2)
    assert ex.status_text() == "Automatic at 0.2s | Tick 0"
    ex.step_once()
    assert ex.status_text() == "Manual | Tick 1"
    while not ex.algo.status().terminal:
        ex.advance()
    assert ex.status_text() == f"Found: {ex.ticks} ticks, Path: 5 tiles"


def test_failure_text():
    ex = Executor(load_map(bundled_maps()["05_walled_in"]), algo_kind=Algo.DIJKSTRA)
    while not ex.algo.status().terminal:
        ex.advance()
    assert ex.status_text() == f"Failed after {ex.ticks} ticks"


def test_info_text_labels():
    ex = _executor(algo_kind=Algo.ASTAR, movement=Movement.DIAGONAL, heuristic=Heuristic.OCTILE)
    assert ex.info_text().startswith("Map: custom  Algo: A*  Diag: On  Heur: Octile  |  ")
    ex = _executor(algo_kind=Algo.DIJKSTRA)
    assert "Diag: Off  Heur: N/A" in ex.info_text()


def test_speed_never_negative():
    ex = _executor(update_speed=0.1)
    ex.adjust_speed(-0.05)
    assert ex.update_speed == pytest.approx(0.05)
    ex.adjust_speed(-1)
    assert ex.update_speed == 0.0


def test_restart_clears_ticks_and_progress():
    ex = _executor()
    ex.advance()
    ex.advance()
    ex.restart()
    assert ex.ticks == 0
    assert ex.algo.metrics()["popped"] == 0


def test_algorithm_matches_configuration():
    ex = _executor(algo_kind=Algo.DIJKSTRA, movement=Movement.DIAGONAL)
    assert ex.algo.name == "Dijkstra"
    assert ex.algo.movement is Movement.DIAGONAL
