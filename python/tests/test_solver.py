"""Solver test suite.

Each solvable grid is searched, then the returned plan is replayed through
the real move engine to check that it spells the target word.  Every test
is hard-killed by ``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import random

import pytest

from wordslide import solve
from wordslide.backend.engine.gamerules import move
from wordslide.backend.engine.gamesolver import NoSolution, Plan, Solver
from wordslide.backend.models import Direction, Grid, LockState

DEAD_4X4 = ["ABCD", "BCDA", "CDAB", "DABC"]

# -- cases --------------------------------------------------------------------

_SOLVABLE = [
    {"id": "slide-row", "rows": ["BA.D", "....", "....", "...."], "word": "BAD",
     "moves": 1, "first": Direction.LEFT},
    {"id": "merge-row", "rows": ["AAAD", "....", "....", "...."], "word": "BAD",
     "moves": 1, "first": Direction.LEFT},
    {"id": "slide-column", "rows": ["C...", "....", "A...", "B..."], "word": "CAB",
     "moves": 1, "first": Direction.UP},
    {"id": "already-won", "rows": ["....", ".CAB", "....", "...."], "word": "CAB",
     "moves": 0, "first": None},
]


def _ids(case: dict) -> str:
    return case["id"]


# -- helpers ------------------------------------------------------------------


def _assert_solve(case: dict) -> Plan:
    """Solve the grid and verify the plan reaches the target word."""
    grid = Grid.from_rows(case["rows"], case["word"])

    plan = Solver.solve(grid, rng=random.Random(11))

    assert isinstance(plan, Plan), f"expected a plan, got {plan!r}"
    assert len(plan.steps) == case["moves"]
    assert plan.explored >= 1
    if case["first"] is not None:
        assert plan.directions[0] is case["first"]

    replayed = grid.snapshot()
    Solver.replay(replayed, plan)
    assert replayed.is_won(), f"grid not solved after replay: {replayed.to_rows()}"
    return plan


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("case", _SOLVABLE, ids=_ids)
def test_solve(case: dict) -> None:
    _assert_solve(case)


def test_merge_step_records_its_spawn() -> None:
    plan = _assert_solve(_SOLVABLE[1])
    assert plan.steps[0].spawn is not None


def test_winning_slide_records_no_spawn() -> None:
    plan = _assert_solve(_SOLVABLE[0])
    assert plan.steps[0].spawn is None


def test_dead_grid_reports_loss() -> None:
    result = solve(Grid.from_rows(DEAD_4X4, "BAD"))
    assert result == NoSolution("loss", 1)


def test_budget_stops_search() -> None:
    grid = Grid.from_rows(["A...", "....", "....", "...."], "XYZ")
    result = Solver.solve(grid, rng=random.Random(0), max_states=1)

    assert isinstance(result, NoSolution)
    assert result.reason == "budget"
    assert result.explored == 1


def test_solver_ignores_locks() -> None:
    grid = Grid.from_rows(["BA.D", "....", "....", "...."], "BAD")
    grid.get(0, 3).set_lock(LockState.DOUBLE_LOCKED)

    live = grid.copy()
    move(live, Direction.LEFT, rng=random.Random(0))
    assert not live.is_won()

    plan = Solver.solve(grid, rng=random.Random(0))
    assert isinstance(plan, Plan)
    assert plan.directions == [Direction.LEFT]


def test_solve_leaves_input_untouched() -> None:
    grid = Grid.from_rows(["A.A.", "..B.", "....", "...."], "BAD")
    grid.get(1, 2).set_lock(LockState.LOCKED)
    before = grid.serialize()

    Solver.solve(grid, rng=random.Random(0), max_states=50)

    assert grid.serialize() == before
    assert grid.get(1, 2).lock_state is LockState.LOCKED


def test_target_word_override() -> None:
    grid = Grid.from_rows(["DA.B", "....", "....", "...."], "BAD")
    plan = solve(grid, "DAB", rng=random.Random(0))

    assert isinstance(plan, Plan)
    assert plan.directions == [Direction.LEFT]


def test_same_seed_same_plan() -> None:
    grid = Grid.from_rows(_SOLVABLE[2]["rows"], "CAB")
    first = Solver.solve(grid, rng=random.Random(5))
    second = Solver.solve(grid, rng=random.Random(5))
    assert first == second


def test_hint() -> None:
    grid = Grid.from_rows(["BA.D", "....", "....", "...."], "BAD")
    assert Solver.hint(grid, rng=random.Random(0)) is Direction.LEFT
    assert Solver.hint(Grid.from_rows(DEAD_4X4, "BAD")) is None
