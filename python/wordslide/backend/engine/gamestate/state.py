"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging

from wordslide.backend.models.grid import Grid, WinningRun

logger = logging.getLogger(__name__)


class GameState:
    """Holds the current grid, score, move counter, and remaining removes."""

    def __init__(self, grid: Grid, removes: int) -> None:
        self.grid = grid
        self.moves: int = 0
        self.score: int = 0
        self.removes: int = removes
        self.winning_run: WinningRun | None = None
        self.lost: bool = False
        # set once the solver has taken over this game
        self.solver_used: bool = False

    # -- moves ----------------------------------------------------------------

    def record_move(self, points: int) -> None:
        self.moves += 1
        self.score += points

    def use_remove(self) -> None:
        self.removes -= 1

    # -- outcome --------------------------------------------------------------

    def refresh(self) -> None:
        """Re-read win and loss from the grid.

        Once the game is over the result is final; only a new
        :class:`GameState` starts a fresh game.
        """
        if self.is_over:
            return
        self.winning_run = self.grid.find_winning_run()
        self.lost = self.winning_run is None and self.grid.is_lost(self.removes)
        if self.is_over:
            if self.won:
                logger.info(
                    "won with %s at %s after %d moves",
                    self.winning_run.word, self.winning_run.cells, self.moves,
                )
            else:
                logger.info("lost after %d moves, score %d", self.moves, self.score)

    @property
    def won(self) -> bool:
        return self.winning_run is not None

    @property
    def is_over(self) -> bool:
        return self.won or self.lost
