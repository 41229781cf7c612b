"""Grid model: construction, win scan, loss predicate, removal."""

from __future__ import annotations

import pytest

from wordslide import check_loss, check_win, new_grid, remove_tile
from wordslide.backend.models import Grid, LockState, Tile

DEAD_4X4 = ["ABCD", "BCDA", "CDAB", "DABC"]


# -- construction -------------------------------------------------------------


def test_new_grid_is_empty() -> None:
    grid = new_grid(4, 4, "BAD")
    assert (grid.rows, grid.cols) == (4, 4)
    assert grid.serialize() == "." * 16
    assert len(grid.empty_cells()) == 16


def test_dimensions_are_not_fixed_to_four() -> None:
    grid = new_grid(3, 6, "CAB")
    assert len(grid.cells) == 3
    assert all(len(row) == 6 for row in grid.cells)


@pytest.mark.parametrize("word", ["BA", "BADE", ""])
def test_target_word_must_have_three_letters(word: str) -> None:
    with pytest.raises(ValueError):
        new_grid(4, 4, word)


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows(["AB..", "A.."], "BAD")


def test_from_rows_layout() -> None:
    grid = Grid.from_rows(["BA.D", "....", "..C.", "...."], "BAD")
    assert grid.get(0, 0).letter == "B"
    assert grid.get(0, 2) is None
    assert grid.get(2, 2).letter == "C"
    assert grid.to_rows() == ["BA.D", "....", "..C.", "...."]


def test_out_of_bounds_access_raises() -> None:
    grid = new_grid(4, 4, "BAD")
    with pytest.raises(IndexError):
        grid.get(4, 0)
    with pytest.raises(IndexError):
        grid.get(0, -1)


# -- win ----------------------------------------------------------------------


def test_win_returns_the_three_tiles() -> None:
    grid = Grid.from_rows(["....", ".BAD", "....", "...."], "BAD")
    b, a, d = grid.get(1, 1), grid.get(1, 2), grid.get(1, 3)

    run = check_win(grid, "BAD")

    assert run is not None
    assert run.cells == ((1, 1), (1, 2), (1, 3))
    assert run.tiles[0] is b and run.tiles[1] is a and run.tiles[2] is d


def test_win_requires_exact_order() -> None:
    grid = Grid.from_rows(["....", ".BAD", "....", "...."], "BAD")
    assert check_win(grid, "DAB") is None


def test_win_in_column() -> None:
    grid = Grid.from_rows(["..C.", "..A.", "..B.", "...."], "CAB")
    run = check_win(grid)
    assert run is not None
    assert run.cells == ((0, 2), (1, 2), (2, 2))


def test_rows_are_scanned_before_columns() -> None:
    grid = Grid.from_rows(["BAD.", "A...", "D...", "...."], "BAD")
    run = check_win(grid)
    assert run.cells == ((0, 0), (0, 1), (0, 2))


def test_win_needs_all_three_cells_occupied() -> None:
    grid = Grid.from_rows(["B.AD", "....", "....", "...."], "BAD")
    assert check_win(grid) is None


def test_win_is_case_sensitive() -> None:
    grid = Grid.from_rows(["BAD.", "....", "....", "...."], "BAD")
    assert check_win(grid, "bad") is None


# -- loss ---------------------------------------------------------------------


def test_full_dead_grid_is_lost_only_without_removes() -> None:
    grid = Grid.from_rows(DEAD_4X4, "BAD")
    assert check_loss(grid, 0) is True
    assert check_loss(grid, 1) is False


def test_grid_with_gap_is_not_lost() -> None:
    grid = Grid.from_rows(["ABC.", "BCDA", "CDAB", "DABC"], "BAD")
    assert check_loss(grid, 0) is False


@pytest.mark.parametrize(
    "rows",
    [
        ["AACD", "BCDA", "CDAB", "DABC"],  # horizontal pair
        ["ABCD", "ACDA", "CDAB", "DABC"],  # vertical pair
    ],
)
def test_full_grid_with_merge_is_not_lost(rows: list[str]) -> None:
    assert check_loss(Grid.from_rows(rows, "BAD"), 0) is False


def test_loss_ignores_lock_state() -> None:
    grid = Grid.from_rows(["AACD", "BCDA", "CDAB", "DABC"], "BAD")
    grid.get(0, 0).set_lock(LockState.DOUBLE_LOCKED)
    assert check_loss(grid, 0) is False


# -- removal ------------------------------------------------------------------


def test_remove_tile_clears_cell_unconditionally() -> None:
    grid = Grid.from_rows(["A...", "....", "....", "...."], "BAD")
    tile = grid.get(0, 0)
    tile.set_lock(LockState.DOUBLE_LOCKED)

    assert remove_tile(grid, 0, 0) is tile
    assert grid.get(0, 0) is None
    assert remove_tile(grid, 0, 0) is None


# -- helpers on the model -----------------------------------------------------


def test_target_letter_cells() -> None:
    grid = Grid.from_rows(["BXA.", "...D", "....", "Z..."], "BAD")
    assert grid.target_letter_cells() == {(0, 0), (0, 2), (1, 3)}


def test_snapshot_strips_locks_but_copy_keeps_them() -> None:
    grid = Grid.from_rows(["AB..", "....", "....", "...."], "BAD")
    grid.get(0, 0).set_lock(LockState.LOCKED)
    grid.cells[0][1] = Tile("B", wildcard=True)

    snap = grid.snapshot()
    dup = grid.copy()

    assert snap.serialize() == dup.serialize() == grid.serialize()
    assert snap.get(0, 0).lock_state is LockState.UNLOCKED
    assert not snap.has_wildcard()
    assert dup.get(0, 0).lock_state is LockState.LOCKED
    assert dup.has_wildcard()
    assert dup.get(0, 0) is not grid.get(0, 0)


def test_from_serialized_matches_from_rows() -> None:
    rows = ["BA.", ".C.", "..D"]
    grid = Grid.from_serialized("".join(rows), 3, 3, "BAD")
    assert grid.to_rows() == rows

    with pytest.raises(ValueError):
        Grid.from_serialized("BA..", 3, 3, "BAD")


def test_grids_compare_by_identity() -> None:
    grid = Grid.from_rows(["BA..", "....", "....", "...."], "BAD")
    twin = grid.copy()

    assert grid == grid
    assert grid != twin
    assert grid.serialize() == twin.serialize()
