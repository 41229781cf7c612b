"""Grid generation and tile spawning."""

from __future__ import annotations

import random

import pytest

from wordslide.backend.engine.gamegenerator import GameGenerator, new_grid
from wordslide.backend.models import Grid, GridFullError
from wordslide.config import WORD_BANK


def test_spawn_letter_is_mostly_a() -> None:
    rng = random.Random(1234)
    draws = [GameGenerator.spawn_letter(rng) for _ in range(2000)]

    assert set(draws) == {"A", "B"}
    assert 0.86 < draws.count("A") / len(draws) < 0.94


@pytest.mark.parametrize(("percent", "letter"), [(100, "A"), (0, "B")])
def test_spawn_letter_extremes(percent: int, letter: str) -> None:
    rng = random.Random(0)
    assert {GameGenerator.spawn_letter(rng, percent) for _ in range(50)} == {letter}


def test_spawn_fills_the_only_empty_cell() -> None:
    grid = Grid.from_rows(["ABC", "DE.", "FGH"], "XYZ")
    spawn = GameGenerator.spawn_tile(grid, random.Random(3))

    assert (spawn.row, spawn.col) == (1, 2)
    assert grid.is_full()
    assert grid.get(1, 2).letter == spawn.letter


def test_spawn_on_full_grid_raises() -> None:
    grid = Grid.from_rows(["ABC", "DEF", "GHI"], "XYZ")
    with pytest.raises(GridFullError):
        GameGenerator.spawn_tile(grid, random.Random(3))


def test_spawn_without_wildcard_guarantee() -> None:
    grid = new_grid(3, 3, "XYZ")
    spawn = GameGenerator.spawn_tile(grid, random.Random(3), ensure_wildcard=False)
    assert not grid.get(spawn.row, spawn.col).wildcard


def test_starting_tiles() -> None:
    grid = new_grid(4, 4, "BAD")
    GameGenerator.starting_tiles(grid, random.Random(9))

    tiles = [tile for _, _, tile in grid.occupied()]
    assert len(tiles) == 2
    assert all(tile.letter == "A" for tile in tiles)
    assert sorted(tile.wildcard for tile in tiles) == [False, True]


def test_starting_tiles_need_two_cells() -> None:
    grid = Grid.from_rows(["ABC", "DEF", "GH."], "XYZ")
    with pytest.raises(GridFullError):
        GameGenerator.starting_tiles(grid, random.Random(9))


def test_generate_draws_target_from_bank() -> None:
    grid = GameGenerator.generate(5, 6, random.Random(2))
    assert grid.target_word in WORD_BANK
    assert (grid.rows, grid.cols) == (5, 6)
    assert len(grid.empty_cells()) == 28

    custom = GameGenerator.generate(4, 4, random.Random(2), ("CAB",))
    assert custom.target_word == "CAB"


def test_generation_is_reproducible_with_a_seed() -> None:
    first = GameGenerator.generate(4, 4, random.Random(42))
    second = GameGenerator.generate(4, 4, random.Random(42))
    assert first.serialize() == second.serialize()
    assert first.target_word == second.target_word
