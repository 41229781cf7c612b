"""Exceptions raised by the board engine."""

from __future__ import annotations


class WordSlideError(Exception):
    """Base class for every engine error."""


class InvalidDirectionError(WordSlideError, ValueError):
    """A move was requested in something other than the four directions."""


class GridFullError(WordSlideError, RuntimeError):
    """A tile was spawned on a grid with no empty cell."""


class TileError(WordSlideError):
    """An operation was applied to a tile that does not support it."""
