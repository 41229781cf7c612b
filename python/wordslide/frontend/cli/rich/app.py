"""Rich terminal frontend: tables, colours, and panels.

Drives a :class:`GamePlay` session from single keypresses.  Grid moves use
the arrow keys / WASD; a cell cursor (IJKL) selects the tile that the
remove, lock, and relabel actions apply to.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wordslide.backend.engine.gameplay import GamePlay
from wordslide.backend.engine.gamesolver import NoSolution
from wordslide.backend.models import Direction, Grid, LockState, WordSlideError
from wordslide.config import GameConfig
from wordslide.frontend.cli.input_handler import get_char, get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CURSOR_STEPS = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}

_NO_SOLUTION = {
    "loss": "[red]No solution: the grid is already dead.[/red]",
    "exhausted": "[red]No solution.[/red]",
    "budget": "[yellow]No solution found within the search budget.[/yellow]",
}

_HELP = (
    "Spell the word in a row or column.  (A) locked: slides, never merges.  "
    "[A] double-locked: fixed in place.  Grey tiles are wildcards (E to edit)."
)

STEP_DELAY = 0.4


# -- grid rendering -----------------------------------------------------------


def _cell_text(grid: Grid, row: int, col: int) -> str:
    tile = grid.get(row, col)
    if tile is None:
        return "·"
    if tile.lock_state is LockState.LOCKED:
        return f"({tile.letter})"
    if tile.lock_state is LockState.DOUBLE_LOCKED:
        return f"[{tile.letter}]"
    return tile.letter


def _render_grid(
    game: GamePlay, cursor: tuple[int, int] | None = None
) -> Table:
    """Return a Rich Table representing the letter grid."""
    grid = game.grid
    winning = set(game.state.winning_run.cells) if game.is_won else set()
    targets = grid.target_letter_cells()

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.cols):
        table.add_column(width=3, justify="center")

    for r in range(grid.rows):
        cells: list[Text] = []
        for c in range(grid.cols):
            tile = grid.get(r, c)
            if tile is None:
                style = "dim"
            elif (r, c) in winning:
                style = "bold white on #67ac61"
            elif tile.wildcard:
                style = "bold #787c80 on white"
            elif (r, c) in targets:
                style = "bold #c8b450"
            else:
                style = "bold white"
            if cursor == (r, c):
                style += " reverse"
            cells.append(Text(_cell_text(grid, r, c), style=style))
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Word: ", style="dim")
    stats.append(game.grid.target_word, style="bold #c8b450")
    stats.append("    Score: ", style="dim")
    stats.append(str(game.state.score), style="bold yellow")
    stats.append("    Removes: ", style="dim")
    stats.append(str(game.state.removes), style="bold yellow")
    return stats


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→/WASD", "shift"),
        ("IJKL", "select"),
        ("X", "remove"),
        ("O", "lock"),
        ("P", "double-lock"),
        ("E", "edit"),
        ("N", "hint"),
        ("V", "solve"),
        ("R", "restart"),
        ("H", "help"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


def _draw_game(
    game: GamePlay, cursor: tuple[int, int] | None, status: str = ""
) -> None:
    console.clear()

    if game.is_won:
        title, border = "[bold green]You Win![/bold green]", "bold green"
    elif game.is_lost:
        title, border = "[bold red]You Lose[/bold red]", "bold red"
    else:
        title, border = "[bold cyan]Word Slide[/bold cyan]", "bright_blue"

    body = Group(
        Align.center(_render_grid(game, cursor)),
        Text(""),
        Align.center(_stats(game)),
    )
    panel = Panel(
        body,
        title=title,
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


# -- solver helpers -----------------------------------------------------------


def _hint(game: GamePlay) -> str:
    direction = game.hint()
    if direction is None:
        return "[yellow]No hint available.[/yellow]"
    return f"[cyan]Hint:[/cyan] try [bold]{direction.value}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    """Run the solver and replay its plan step by step."""
    if game.state.is_over:
        return "[yellow]The game is over.[/yellow]"
    result = game.solve()
    if result is None:
        return "[yellow]The solver has already been used for this game.[/yellow]"
    if isinstance(result, NoSolution):
        return _NO_SOLUTION[result.reason]

    game.moves_permitted = False
    try:
        total = len(result.steps)
        for i, step in enumerate(result.steps, 1):
            game.play_step(step)
            progress = f"Solving… move {i}/{total} ({step.direction.value})"
            _draw_game(game, None, f"[bold cyan]{progress}[/bold cyan]")
            sys.stdout.flush()
            time.sleep(STEP_DELAY)
    finally:
        game.moves_permitted = True
    return f"[bold green]Solved in {len(result.steps)} moves![/bold green]"


# -- game loop ----------------------------------------------------------------


def _cell_action(game: GamePlay, key: str, cursor: tuple[int, int]) -> str:
    row, col = cursor
    try:
        if key == "remove":
            if game.remove_tile(row, col):
                return f"Removed tile at ({row}, {col})."
            return "[yellow]Nothing to remove.[/yellow]"
        if key == "lock":
            return f"Tile is now {game.toggle_lock(row, col).value}."
        if key == "double_lock":
            return f"Tile is now {game.toggle_double_lock(row, col).value}."
        if key == "edit":
            console.print(Align.center(Text("Type the new letter…", style="cyan")))
            game.relabel(row, col, get_char())
            return "Wildcard relabelled."
    except (WordSlideError, ValueError) as exc:
        return f"[red]{exc}[/red]"
    return ""


def _play(game: GamePlay) -> None:
    cursor = (0, 0)
    status = ""

    while True:
        _draw_game(game, cursor, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key in _CURSOR_STEPS:
            dr, dc = _CURSOR_STEPS[key]
            cursor = (
                min(max(cursor[0] + dr, 0), game.grid.rows - 1),
                min(max(cursor[1] + dc, 0), game.grid.cols - 1),
            )
        elif key in ("remove", "lock", "double_lock", "edit"):
            status = _cell_action(game, key, cursor)
        elif key == "hint":
            status = _hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "restart":
            game.restart()
        elif key == "help":
            status = _HELP
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(config: GameConfig, rng: random.Random | None = None) -> None:
    """Launch the Rich terminal game."""
    _play(GamePlay(config, rng))
