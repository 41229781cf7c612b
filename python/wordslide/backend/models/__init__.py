from wordslide.backend.models.errors import (
    GridFullError,
    InvalidDirectionError,
    TileError,
    WordSlideError,
)
from wordslide.backend.models.grid import Direction, Grid, WinningRun
from wordslide.backend.models.tile import LockState, Tile

__all__ = [
    "Direction",
    "Grid",
    "GridFullError",
    "InvalidDirectionError",
    "LockState",
    "Tile",
    "TileError",
    "WinningRun",
    "WordSlideError",
]
