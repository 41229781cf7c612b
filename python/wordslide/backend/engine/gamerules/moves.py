"""Directional moves: slide, merge, post-merge slide, spawn.

Two rule sets share the same slide and merge passes:

* :func:`move` is live play. Lock states are honoured, a spawn follows only
  a move that shifted tiles without merging, and the orchestrator's
  ``moves_permitted`` gate is checked before anything changes.
* :func:`simulate_move` is what the solver searches with. Every tile moves
  and merges whatever its lock state, and a tile is spawned after every
  move unless the slide alone already spelled the target word.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from wordslide.backend.engine.gamegenerator.generator import GameGenerator, Spawn
from wordslide.backend.models.errors import InvalidDirectionError
from wordslide.backend.models.grid import Direction, Grid
from wordslide.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


@dataclass(frozen=True)
class MoveOutcome:
    accepted: bool
    moved: bool = False
    merged: bool = False
    spawned: Spawn | None = None
    won: bool = False

    @property
    def changed(self) -> bool:
        return self.moved or self.merged


REJECTED = MoveOutcome(accepted=False)


def as_direction(value: Direction | str) -> Direction:
    """Coerce *value* to a :class:`Direction` or fail loudly."""
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except (ValueError, TypeError):
        raise InvalidDirectionError(f"Invalid direction: {value!r}") from None


def lines(grid: Grid, direction: Direction) -> list[list[Cell]]:
    """Each row or column, ordered from the edge tiles move toward outward."""
    rows, cols = range(grid.rows), range(grid.cols)
    if direction is Direction.LEFT:
        return [[(r, c) for c in cols] for r in rows]
    if direction is Direction.RIGHT:
        return [[(r, c) for c in reversed(cols)] for r in rows]
    if direction is Direction.UP:
        return [[(r, c) for r in rows] for c in cols]
    if direction is Direction.DOWN:
        return [[(r, c) for r in reversed(rows)] for c in cols]
    raise InvalidDirectionError(f"Invalid direction: {direction!r}")


# -- passes -------------------------------------------------------------------


def slide(grid: Grid, direction: Direction, *, respect_locks: bool = True) -> bool:
    """Push every movable tile as far toward the edge as it can go.

    Any occupied cell stops a sliding tile, including a double-locked one
    that itself stays put.  Returns True if some tile changed cell.
    """
    cells = grid.cells
    moved = False
    for line in lines(grid, direction):
        for i in range(1, len(line)):
            r, c = line[i]
            tile = cells[r][c]
            if tile is None or (respect_locks and not tile.is_movable):
                continue
            target = i
            while target > 0:
                pr, pc = line[target - 1]
                if cells[pr][pc] is not None:
                    break
                target -= 1
            if target != i:
                tr, tc = line[target]
                cells[tr][tc] = tile
                cells[r][c] = None
                moved = True
    return moved


def merge(grid: Grid, direction: Direction, *, respect_locks: bool = True) -> int:
    """Fold equal neighbours into the tile nearer the edge.

    Returns the number of merges performed.
    """
    cells = grid.cells
    merges = 0
    for line in lines(grid, direction):
        for (r, c), (nr, nc) in zip(line, line[1:]):
            current, neighbour = cells[r][c], cells[nr][nc]
            if current is None or neighbour is None:
                continue
            if current.letter != neighbour.letter:
                continue
            if respect_locks and not (
                current.is_merge_eligible and neighbour.is_merge_eligible
            ):
                continue
            if respect_locks:
                current.merge()
            else:
                current.advance()
            cells[nr][nc] = None
            merges += 1
            logger.debug(
                "merged (%d, %d) into (%d, %d) -> %s", nr, nc, r, c, current.letter
            )
    return merges


# -- full move cycles ---------------------------------------------------------


def move(
    grid: Grid,
    direction: Direction | str,
    moves_permitted: bool = True,
    *,
    game_over: bool = False,
    rng: random.Random | None = None,
    a_percent: int = DEFAULT_CONFIG.spawn_a_percent,
) -> MoveOutcome:
    """Apply one live move to *grid* in place."""
    direction = as_direction(direction)
    if not moves_permitted:
        logger.debug("move %s rejected: moves not permitted", direction)
        return REJECTED
    if game_over or grid.is_won():
        logger.debug("move %s rejected: game is over", direction)
        return REJECTED

    moved = slide(grid, direction)
    if grid.is_won():
        return MoveOutcome(accepted=True, moved=moved, won=True)

    merged = merge(grid, direction) > 0
    if merged:
        slide(grid, direction)
    won = grid.is_won()

    spawned = None
    if moved and not merged and not won:
        spawned = GameGenerator.spawn_tile(
            grid, rng or random.Random(), a_percent=a_percent
        )
    return MoveOutcome(
        accepted=True, moved=moved, merged=merged, spawned=spawned, won=won
    )


def simulate_move(
    grid: Grid,
    direction: Direction | str,
    rng: random.Random | None = None,
    *,
    a_percent: int = DEFAULT_CONFIG.spawn_a_percent,
) -> MoveOutcome:
    """Apply one move under the solver's rules, ignoring lock states."""
    direction = as_direction(direction)
    moved = slide(grid, direction, respect_locks=False)
    if grid.is_won():
        return MoveOutcome(accepted=True, moved=moved, won=True)

    merged = merge(grid, direction, respect_locks=False) > 0
    slide(grid, direction, respect_locks=False)

    spawned = None
    if not grid.is_full():
        spawned = GameGenerator.spawn_tile(
            grid, rng or random.Random(), ensure_wildcard=False, a_percent=a_percent
        )
    return MoveOutcome(
        accepted=True, moved=moved, merged=merged, spawned=spawned, won=grid.is_won()
    )


def replay_move(
    grid: Grid, direction: Direction | str, spawn: Spawn | None
) -> MoveOutcome:
    """Repeat a simulated move, placing the recorded spawn instead of drawing one."""
    direction = as_direction(direction)
    moved = slide(grid, direction, respect_locks=False)
    if grid.is_won():
        return MoveOutcome(accepted=True, moved=moved, won=True)

    merged = merge(grid, direction, respect_locks=False) > 0
    slide(grid, direction, respect_locks=False)
    if spawn is not None:
        GameGenerator.place_spawn(grid, spawn)
    return MoveOutcome(
        accepted=True, moved=moved, merged=merged, spawned=spawn, won=grid.is_won()
    )
