"""Tile model: a single letter plus its lock state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from wordslide.backend.models.errors import TileError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class LockState(StrEnum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"
    DOUBLE_LOCKED = "double_locked"


def _check_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise ValueError(f"Tile letter must be one of A-Z, got {letter!r}.")
    return letter


@dataclass(eq=False)
class Tile:
    """One occupied cell.

    ``LOCKED`` tiles still slide but never merge.  ``DOUBLE_LOCKED`` tiles
    neither slide nor merge and act as fixed obstacles.  A *wildcard* tile
    behaves like any other tile on the board; the orchestrator may relabel it.

    Equality is identity: two tiles with the same letter are still distinct
    cells' tiles.
    """

    letter: str
    lock_state: LockState = LockState.UNLOCKED
    wildcard: bool = False

    def __post_init__(self) -> None:
        _check_letter(self.letter)
        self.lock_state = LockState(self.lock_state)

    # -- predicates -----------------------------------------------------------

    @property
    def is_merge_eligible(self) -> bool:
        return self.lock_state is LockState.UNLOCKED

    @property
    def is_movable(self) -> bool:
        return self.lock_state is not LockState.DOUBLE_LOCKED

    # -- transitions ----------------------------------------------------------

    def merge(self) -> None:
        """Advance to the next letter (Z wraps to A).  Ignored unless eligible."""
        if self.is_merge_eligible:
            self.advance()

    def advance(self) -> None:
        """Step to the next letter regardless of lock state."""
        self.letter = ALPHABET[(ALPHABET.index(self.letter) + 1) % len(ALPHABET)]

    def set_lock(self, state: LockState | str) -> None:
        try:
            self.lock_state = LockState(state)
        except ValueError:
            raise ValueError(f"Invalid lock state: {state!r}") from None

    def relabel(self, letter: str) -> None:
        """Redefine a wildcard tile's letter from player input."""
        if not self.wildcard:
            raise TileError("Only wildcard tiles can be relabelled.")
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"Expected a single letter, got {letter!r}.")
        self.letter = _check_letter(letter.upper())

    # -- copies ---------------------------------------------------------------

    def copy(self) -> Tile:
        return Tile(self.letter, self.lock_state, self.wildcard)

    def stripped(self) -> Tile:
        """Return a plain unlocked copy carrying only the letter."""
        return Tile(self.letter)
