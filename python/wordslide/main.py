"""Word Slide.

Usage::

    wordslide play                    # Rich terminal game, 4×4
    wordslide play -r 5 -c 5 -w CAB   # bigger grid, fixed target word
    wordslide solve BA.D .... .... .... -w BAD
"""

from __future__ import annotations

import importlib
import logging
import random
from dataclasses import replace
from enum import StrEnum
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from wordslide.backend.engine.gamesolver import NoSolution, Solver
from wordslide.backend.models import Grid, WordSlideError
from wordslide.config import DEFAULT_CONFIG, GameConfig

_FRONTEND = "wordslide.frontend.cli.rich.app"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_config(
    rows: int, cols: int, word: Optional[str], max_states: Optional[int]
) -> GameConfig:
    config = replace(DEFAULT_CONFIG, rows=rows, cols=cols)
    if word is not None:
        config = replace(config, word_bank=(word,))
    if max_states is not None:
        config = replace(config, solver_max_states=max_states)
    return config


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Word Slide letter-merging puzzle.")

_LOG_LEVEL = typer.Option(LogLevel.warning, "--log-level", help="Logging verbosity.")
_SEED = typer.Option(None, "--seed", help="Seed for every random draw.")
_MAX_STATES = typer.Option(
    None, "--max-states", min=1, help="Stop the solver after this many states."
)


@app.command()
def play(
    rows: int = typer.Option(DEFAULT_CONFIG.rows, "-r", "--rows", min=3, max=8),
    cols: int = typer.Option(DEFAULT_CONFIG.cols, "-c", "--cols", min=3, max=8),
    word: Optional[str] = typer.Option(
        None, "-w", "--word",
        help="Target word. Omit to draw one from the word bank.",
    ),
    seed: Optional[int] = _SEED,
    max_states: Optional[int] = _MAX_STATES,
    log_level: LogLevel = _LOG_LEVEL,
) -> None:
    """Play in the terminal."""
    _configure_logging(log_level)
    if word is not None:
        word = word.upper()
        try:
            Grid(rows=rows, cols=cols, target_word=word)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--word") from None
    config = _build_config(rows, cols, word, max_states)

    mod = importlib.import_module(_FRONTEND)
    mod.run(config, random.Random(seed))


@app.command()
def solve(
    grid_rows: List[str] = typer.Argument(
        ..., metavar="ROW...", help="One string per grid row, '.' for an empty cell."
    ),
    word: str = typer.Option(..., "-w", "--word", help="Target word."),
    seed: Optional[int] = _SEED,
    max_states: Optional[int] = _MAX_STATES,
    log_level: LogLevel = _LOG_LEVEL,
) -> None:
    """Print a shortest move plan for a grid."""
    _configure_logging(log_level)
    try:
        grid = Grid.from_rows([row.upper() for row in grid_rows], word.upper())
    except (WordSlideError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None

    if max_states is None:
        max_states = DEFAULT_CONFIG.solver_max_states
    result = Solver.solve(grid, rng=random.Random(seed), max_states=max_states)
    if isinstance(result, NoSolution):
        typer.echo(f"No solution ({result.reason}, {result.explored} states explored).")
        return

    for i, step in enumerate(result.steps, 1):
        line = f"{i:>3}. {step.direction.value}"
        if step.spawn is not None:
            line += f"  then {step.spawn.letter} at ({step.spawn.row}, {step.spawn.col})"
        typer.echo(line)
    typer.echo(f"Solved in {len(result.steps)} moves ({result.explored} states explored).")


if __name__ == "__main__":
    app()
