"""Creates grids, starting tiles, target words, and spawned tiles."""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from wordslide.backend.models.errors import GridFullError
from wordslide.backend.models.grid import Grid
from wordslide.backend.models.tile import Tile
from wordslide.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class Spawn(NamedTuple):
    """Where a new tile appeared and what it reads."""

    row: int
    col: int
    letter: str


class GameGenerator:
    """Stateless factory, all methods are static.

    Every random draw goes through the ``rng`` argument so callers (and
    tests) control the sequence.
    """

    @staticmethod
    def new_grid(rows: int, cols: int, target_word: str) -> Grid:
        """Return an empty grid."""
        return Grid(rows=rows, cols=cols, target_word=target_word)

    @staticmethod
    def target_word(
        rng: random.Random, word_bank: tuple[str, ...] = DEFAULT_CONFIG.word_bank
    ) -> str:
        return rng.choice(word_bank)

    @staticmethod
    def starting_tiles(grid: Grid, rng: random.Random) -> None:
        """Place one ``A`` tile and one ``A`` wildcard at two distinct cells."""
        empties = grid.empty_cells()
        if len(empties) < 2:
            raise GridFullError("Need two empty cells for the starting tiles.")
        (r1, c1), (r2, c2) = rng.sample(empties, 2)
        grid.place(r1, c1, Tile("A"))
        grid.place(r2, c2, Tile("A", wildcard=True))

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        rng: random.Random,
        word_bank: tuple[str, ...] = DEFAULT_CONFIG.word_bank,
    ) -> Grid:
        """Return a fresh game grid: random target word and starting tiles."""
        grid = GameGenerator.new_grid(rows, cols, GameGenerator.target_word(rng, word_bank))
        GameGenerator.starting_tiles(grid, rng)
        return grid

    # -- spawning -------------------------------------------------------------

    @staticmethod
    def spawn_letter(
        rng: random.Random, a_percent: int = DEFAULT_CONFIG.spawn_a_percent
    ) -> str:
        return "A" if rng.randrange(100) < a_percent else "B"

    @staticmethod
    def spawn_tile(
        grid: Grid,
        rng: random.Random,
        *,
        ensure_wildcard: bool = True,
        a_percent: int = DEFAULT_CONFIG.spawn_a_percent,
    ) -> Spawn:
        """Put a new tile on a random empty cell.

        With *ensure_wildcard* the tile becomes a wildcard whenever the grid
        holds none.
        """
        empties = grid.empty_cells()
        if not empties:
            raise GridFullError("Cannot spawn a tile on a full grid.")
        row, col = rng.choice(empties)
        letter = GameGenerator.spawn_letter(rng, a_percent)
        wildcard = ensure_wildcard and not grid.has_wildcard()
        grid.place(row, col, Tile(letter, wildcard=wildcard))
        logger.debug(
            "spawned %s at (%d, %d)%s",
            letter, row, col, " [wildcard]" if wildcard else "",
        )
        return Spawn(row, col, letter)

    @staticmethod
    def place_spawn(grid: Grid, spawn: Spawn) -> None:
        """Recreate a previously recorded spawn as a plain tile."""
        grid.place(spawn.row, spawn.col, Tile(spawn.letter))


def new_grid(rows: int, cols: int, target_word: str) -> Grid:
    return GameGenerator.new_grid(rows, cols, target_word)
