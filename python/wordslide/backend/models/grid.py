"""Grid model for the word slide game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, NamedTuple

from wordslide.backend.models.tile import Tile

EMPTY = "."
WORD_LENGTH = 3


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class WinningRun(NamedTuple):
    """Three contiguous cells spelling the target word."""

    cells: tuple[tuple[int, int], ...]
    tiles: tuple[Tile, ...]
    word: str


def _check_target(target_word: str) -> str:
    if not isinstance(target_word, str) or len(target_word) != WORD_LENGTH:
        raise ValueError(
            f"Target word must be exactly {WORD_LENGTH} characters, "
            f"got {target_word!r}."
        )
    return target_word


@dataclass(eq=False)
class Grid:
    """Represents the letter grid.

    Cells are stored as a 2D list holding a :class:`Tile` or ``None``.
    Dimensions never change once the grid is built.  Equality is identity;
    compare :meth:`serialize` to compare letters.
    """

    rows: int
    cols: int
    target_word: str
    cells: list[list[Tile | None]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Grid needs at least one row and column, got {self.rows}×{self.cols}."
            )
        _check_target(self.target_word)
        if not self.cells:
            self.cells = [[None] * self.cols for _ in range(self.rows)]
        elif len(self.cells) != self.rows or any(
            len(row) != self.cols for row in self.cells
        ):
            raise ValueError(f"Cells do not match a {self.rows}×{self.cols} grid.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[str], target_word: str) -> Grid:
        """Create a grid from one string per row, ``.`` marking empty cells.

        Example::

            Grid.from_rows(["BA.D", "....", "....", "...."], "BAD")
        """
        if not rows:
            raise ValueError("Expected at least one row.")
        width = len(rows[0])
        cells: list[list[Tile | None]] = []
        for r, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(
                    f"Row {r} has {len(line)} cells, expected {width}."
                )
            cells.append([None if ch == EMPTY else Tile(ch) for ch in line])
        return cls(rows=len(rows), cols=width, target_word=target_word, cells=cells)

    @classmethod
    def from_serialized(
        cls, flat: str, rows: int, cols: int, target_word: str
    ) -> Grid:
        """Inverse of :meth:`serialize`."""
        if len(flat) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} cells for a {rows}×{cols} grid, got {len(flat)}."
            )
        return cls.from_rows(
            [flat[r * cols : (r + 1) * cols] for r in range(rows)], target_word
        )

    # -- cell access ----------------------------------------------------------

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.rows}×{self.cols} grid."
            )

    def get(self, row: int, col: int) -> Tile | None:
        self._check_bounds(row, col)
        return self.cells[row][col]

    def place(self, row: int, col: int, tile: Tile) -> None:
        self._check_bounds(row, col)
        if self.cells[row][col] is not None:
            raise ValueError(f"Cell ({row}, {col}) is already occupied.")
        self.cells[row][col] = tile

    def remove(self, row: int, col: int) -> Tile | None:
        """Delete the tile at (row, col) unconditionally and return it."""
        self._check_bounds(row, col)
        tile = self.cells[row][col]
        self.cells[row][col] = None
        return tile

    # -- queries --------------------------------------------------------------

    def positions(self) -> Iterator[tuple[int, int]]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def occupied(self) -> Iterator[tuple[int, int, Tile]]:
        for r, c in self.positions():
            tile = self.cells[r][c]
            if tile is not None:
                yield r, c, tile

    def empty_cells(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c in self.positions() if self.cells[r][c] is None]

    def is_full(self) -> bool:
        return all(tile is not None for row in self.cells for tile in row)

    def has_wildcard(self) -> bool:
        return any(tile.wildcard for _, _, tile in self.occupied())

    def has_adjacent_pair(self) -> bool:
        """Check if any two neighbouring tiles share a letter (locks ignored)."""
        for r, c, tile in self.occupied():
            if c + 1 < self.cols:
                right = self.cells[r][c + 1]
                if right is not None and right.letter == tile.letter:
                    return True
            if r + 1 < self.rows:
                below = self.cells[r + 1][c]
                if below is not None and below.letter == tile.letter:
                    return True
        return False

    def find_winning_run(self, target_word: str | None = None) -> WinningRun | None:
        """Return the first 3-cell run spelling *target_word*.

        Rows are scanned top to bottom (left to right within a row), then
        columns left to right (top to bottom within a column).
        """
        word = _check_target(self.target_word if target_word is None else target_word)

        for r in range(self.rows):
            for start in range(self.cols - WORD_LENGTH + 1):
                run = self._read_run([(r, start + i) for i in range(WORD_LENGTH)], word)
                if run is not None:
                    return run

        for c in range(self.cols):
            for start in range(self.rows - WORD_LENGTH + 1):
                run = self._read_run([(start + i, c) for i in range(WORD_LENGTH)], word)
                if run is not None:
                    return run
        return None

    def _read_run(
        self, cells: list[tuple[int, int]], word: str
    ) -> WinningRun | None:
        tiles: list[Tile] = []
        for r, c in cells:
            tile = self.cells[r][c]
            if tile is None:
                return None
            tiles.append(tile)
        if "".join(t.letter for t in tiles) != word:
            return None
        return WinningRun(cells=tuple(cells), tiles=tuple(tiles), word=word)

    def is_won(self, target_word: str | None = None) -> bool:
        return self.find_winning_run(target_word) is not None

    def is_lost(self, remaining_removes: int) -> bool:
        """Full, merge-dead, and no removes left."""
        if not self.is_full():
            return False
        if self.has_adjacent_pair():
            return False
        return remaining_removes == 0

    def target_letter_cells(self, target_word: str | None = None) -> set[tuple[int, int]]:
        """Positions whose tile carries one of the target word's letters."""
        letters = set(self.target_word if target_word is None else target_word)
        return {(r, c) for r, c, tile in self.occupied() if tile.letter in letters}

    def serialize(self) -> str:
        """Row-major letters, ``.`` for empty cells."""
        return "".join(
            EMPTY if tile is None else tile.letter for row in self.cells for tile in row
        )

    def to_rows(self) -> list[str]:
        flat = self.serialize()
        return [flat[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)]

    # -- copies ---------------------------------------------------------------

    def copy(self) -> Grid:
        return Grid(
            rows=self.rows,
            cols=self.cols,
            target_word=self.target_word,
            cells=[[t.copy() if t else None for t in row] for row in self.cells],
        )

    def snapshot(self) -> Grid:
        """Copy carrying letters only: no locks, no wildcard flags."""
        return Grid(
            rows=self.rows,
            cols=self.cols,
            target_word=self.target_word,
            cells=[[t.stripped() if t else None for t in row] for row in self.cells],
        )


# -- engine contract ----------------------------------------------------------


def check_win(grid: Grid, target_word: str | None = None) -> WinningRun | None:
    return grid.find_winning_run(target_word)


def check_loss(grid: Grid, remaining_removes: int) -> bool:
    return grid.is_lost(remaining_removes)


def remove_tile(grid: Grid, row: int, col: int) -> Tile | None:
    """Delete a tile; the caller keeps track of the remove counter."""
    return grid.remove(row, col)
