"""Word slide: a letter-merging grid puzzle engine and its solver."""

from wordslide.backend.engine.gamegenerator import Spawn, new_grid
from wordslide.backend.engine.gamerules import MoveOutcome, move
from wordslide.backend.engine.gamesolver import NoSolution, Plan, PlanStep, solve
from wordslide.backend.models import Direction, Grid, LockState, Tile, WinningRun
from wordslide.backend.models.grid import check_loss, check_win, remove_tile

__all__ = [
    "Direction",
    "Grid",
    "LockState",
    "MoveOutcome",
    "NoSolution",
    "Plan",
    "PlanStep",
    "Spawn",
    "Tile",
    "WinningRun",
    "check_loss",
    "check_win",
    "move",
    "new_grid",
    "remove_tile",
    "solve",
]
