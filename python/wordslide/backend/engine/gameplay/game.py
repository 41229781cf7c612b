"""Core gameplay logic: runs player actions against the live grid."""

from __future__ import annotations

import logging
import random

from wordslide.backend.engine.gamegenerator import GameGenerator
from wordslide.backend.engine.gamerules.moves import MoveOutcome, move, replay_move
from wordslide.backend.engine.gamesolver import NoSolution, Plan, PlanStep, Solver
from wordslide.backend.engine.gamestate import GameState
from wordslide.backend.models.errors import TileError
from wordslide.backend.models.grid import Direction, Grid, remove_tile
from wordslide.backend.models.tile import LockState, Tile
from wordslide.config import DEFAULT_CONFIG, GameConfig

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    ``moves_permitted`` is the settle gate: a frontend clears it while a
    transition is on screen and sets it again once the grid has settled.
    Moves attempted in between are rejected without touching the grid.
    """

    def __init__(
        self, config: GameConfig = DEFAULT_CONFIG, rng: random.Random | None = None
    ) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.moves_permitted = True
        grid = GameGenerator.generate(
            config.rows, config.cols, self.rng, config.word_bank
        )
        self.state = GameState(grid, config.removes)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        config: GameConfig = DEFAULT_CONFIG,
        rng: random.Random | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing grid (e.g. built by hand)."""
        obj = object.__new__(cls)
        obj.config = config
        obj.rng = rng or random.Random()
        obj.moves_permitted = True
        obj.state = GameState(grid, config.removes)
        obj.state.refresh()
        return obj

    def restart(self) -> None:
        """Discard the grid and start over with a new target word."""
        grid = GameGenerator.generate(
            self.config.rows, self.config.cols, self.rng, self.config.word_bank
        )
        self.state = GameState(grid, self.config.removes)
        self.moves_permitted = True
        logger.info("restarted, target word %s", grid.target_word)

    # -- player actions -------------------------------------------------------

    def move(self, direction: Direction | str) -> MoveOutcome:
        outcome = move(
            self.state.grid,
            direction,
            self.moves_permitted,
            game_over=self.state.is_over,
            rng=self.rng,
            a_percent=self.config.spawn_a_percent,
        )
        if outcome.accepted:
            self.state.record_move(self.config.points_per_move)
            self.state.refresh()
        return outcome

    def remove_tile(self, row: int, col: int) -> bool:
        """Spend one remove on the tile at (row, col).

        Returns True if a tile was removed.
        """
        if self.state.is_over or self.state.removes <= 0:
            return False
        if self.grid.get(row, col) is None:
            return False
        remove_tile(self.grid, row, col)
        self.state.use_remove()
        self.state.refresh()
        return True

    def toggle_lock(self, row: int, col: int) -> LockState:
        """Single click: locked <-> unlocked."""
        return self._toggle(row, col, LockState.LOCKED)

    def toggle_double_lock(self, row: int, col: int) -> LockState:
        """Double click: double-locked <-> unlocked."""
        return self._toggle(row, col, LockState.DOUBLE_LOCKED)

    def _toggle(self, row: int, col: int, state: LockState) -> LockState:
        self._check_in_play()
        tile = self._tile_at(row, col)
        if tile.wildcard:
            raise TileError("Wildcard tiles are relabelled, not locked.")
        tile.set_lock(LockState.UNLOCKED if tile.lock_state is state else state)
        return tile.lock_state

    def relabel(self, row: int, col: int, letter: str) -> None:
        self._check_in_play()
        self._tile_at(row, col).relabel(letter)
        self.state.refresh()

    # -- solver ---------------------------------------------------------------

    def solve(self) -> Plan | NoSolution | None:
        """Hand the grid to the solver.

        Every tile is unlocked first, as the solver ignores locks anyway.
        Returns ``None`` if the game is over or was already solved.
        """
        if self.state.solver_used or self.state.is_over:
            return None
        for _, _, tile in self.grid.occupied():
            tile.set_lock(LockState.UNLOCKED)
        self.state.solver_used = True
        return Solver.solve(
            self.grid, rng=self.rng, max_states=self.config.solver_max_states
        )

    def hint(self) -> Direction | None:
        """Suggest a first move without spending the solver or touching locks."""
        if self.state.is_over:
            return None
        return Solver.hint(
            self.grid, rng=random.Random(), max_states=self.config.hint_max_states
        )

    def play_step(self, step: PlanStep) -> MoveOutcome:
        """Replay one solver step on the live grid."""
        outcome = replay_move(self.grid, step.direction, step.spawn)
        self.state.refresh()
        return outcome

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def is_won(self) -> bool:
        return self.state.won

    @property
    def is_lost(self) -> bool:
        return self.state.lost

    # -- helpers --------------------------------------------------------------

    def _check_in_play(self) -> None:
        if self.state.is_over:
            raise TileError("The game is over.")

    def _tile_at(self, row: int, col: int) -> Tile:
        tile = self.grid.get(row, col)
        if tile is None:
            raise TileError(f"No tile at ({row}, {col}).")
        return tile
