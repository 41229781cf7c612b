"""Game settings shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass

WORD_BANK: tuple[str, ...] = (
    "BAD", "CAB", "CAD", "ABC", "ACD", "ABD", "BDC",
    "DAB", "BCA", "CBA", "DAC", "ABB", "BAA", "CBD",
)


@dataclass(frozen=True)
class GameConfig:
    rows: int = 4
    cols: int = 4
    removes: int = 3
    points_per_move: int = 50
    # chance (out of 100) that a spawned tile is "A" rather than "B"
    spawn_a_percent: int = 90
    word_bank: tuple[str, ...] = WORD_BANK
    # None lets the solver run until the queue is exhausted
    solver_max_states: int | None = 50_000
    # cap for single-move hints
    hint_max_states: int | None = 5_000


DEFAULT_CONFIG = GameConfig()
