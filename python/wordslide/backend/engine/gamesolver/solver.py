"""Breadth-first solver: shortest move sequence that spells the target word."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Literal

from wordslide.backend.engine.gamegenerator.generator import Spawn
from wordslide.backend.engine.gamerules.moves import (
    MoveOutcome,
    replay_move,
    simulate_move,
)
from wordslide.backend.models.grid import Direction, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanStep:
    direction: Direction
    spawn: Spawn | None = None


@dataclass(frozen=True)
class Plan:
    """Moves to play, each with the tile that must appear after it."""

    steps: tuple[PlanStep, ...]
    explored: int = 0

    @property
    def directions(self) -> list[Direction]:
        return [step.direction for step in self.steps]


@dataclass(frozen=True)
class NoSolution:
    """The search ended without reaching the target word.

    ``reason`` is ``"loss"`` when a dequeued state was already lost,
    ``"exhausted"`` when the queue ran dry, and ``"budget"`` when
    ``max_states`` was hit.
    """

    reason: Literal["loss", "exhausted", "budget"]
    explored: int = 0


class Solver:
    """Stateless solver, all methods are static."""

    @staticmethod
    def solve(
        grid: Grid,
        target_word: str | None = None,
        *,
        rng: random.Random | None = None,
        max_states: int | None = None,
    ) -> Plan | NoSolution:
        """Search reachable grids level by level.

        States are keyed by their letters alone and rebuilt as plain tiles
        when dequeued, so lock and wildcard status never reach the search and
        every tile moves and merges freely.  Spawned tiles come from *rng* and are
        recorded in the plan so it can be replayed exactly.
        """
        rng = rng or random.Random()
        word = grid.target_word if target_word is None else target_word
        rows, cols = grid.rows, grid.cols
        start = grid.serialize()

        # the frontier holds serialized grids; each key links back to the
        # state it was reached from and the step taken
        queue: deque[str] = deque([start])
        parents: dict[str, tuple[str, PlanStep] | None] = {start: None}
        explored = 0

        while queue:
            if max_states is not None and explored >= max_states:
                logger.debug("solver gave up after %d states", explored)
                return NoSolution("budget", explored)

            key = queue.popleft()
            explored += 1
            state = Grid.from_serialized(key, rows, cols, word)

            if state.is_lost(remaining_removes=0):
                logger.debug("solver hit a lost state after %d states", explored)
                return NoSolution("loss", explored)

            if state.is_won():
                steps = _path(parents, key)
                logger.debug(
                    "solver found a %d-move plan after %d states", len(steps), explored
                )
                return Plan(steps=steps, explored=explored)

            for direction in Direction:
                child = state.copy()
                outcome = simulate_move(child, direction, rng)
                child_key = child.serialize()
                if child_key in parents:
                    continue
                parents[child_key] = (key, PlanStep(direction, outcome.spawned))
                queue.append(child_key)

        logger.debug("solver exhausted %d states", explored)
        return NoSolution("exhausted", explored)

    @staticmethod
    def hint(grid: Grid, **kwargs) -> Direction | None:
        """Return the first move of a shortest plan, or ``None``."""
        result = Solver.solve(grid, **kwargs)
        if isinstance(result, NoSolution) or not result.steps:
            return None
        return result.steps[0].direction

    @staticmethod
    def replay(grid: Grid, plan: Plan) -> MoveOutcome | None:
        """Apply *plan* to *grid* in place under the solver's move rules."""
        outcome = None
        for step in plan.steps:
            outcome = replay_move(grid, step.direction, step.spawn)
        return outcome


def solve(grid: Grid, target_word: str | None = None, **kwargs) -> Plan | NoSolution:
    return Solver.solve(grid, target_word, **kwargs)


def _path(
    parents: dict[str, tuple[str, PlanStep] | None], key: str
) -> tuple[PlanStep, ...]:
    """Walk the parent links from *key* back to the start state."""
    steps: list[PlanStep] = []
    link = parents[key]
    while link is not None:
        key, step = link
        steps.append(step)
        link = parents[key]
    return tuple(reversed(steps))
