"""Cross-platform single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and the cell-action keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "i": "cursor_up",
    "k": "cursor_down",
    "j": "cursor_left",
    "l": "cursor_right",
    "x": "remove",
    "X": "remove",
    "o": "lock",
    "O": "lock",
    "p": "double_lock",
    "P": "double_lock",
    "e": "edit",
    "E": "edit",
    "v": "solve",
    "V": "solve",
    "n": "hint",
    "N": "hint",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "h": "help",
    "?": "help",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"      — shift the grid
        "cursor_up", "cursor_down",
        "cursor_left", "cursor_right"      — move the cell cursor (IJKL)
        "remove", "lock", "double_lock"    — act on the selected cell
        "edit"                             — relabel the selected wildcard
        "solve", "hint"                    — hand the grid to the solver
        "restart", "help", "quit"
        "<char>"                           — unmapped printable char
        ""                                 — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return _resolve(ch)


def get_char() -> str:
    """Read one raw printable character, bypassing the action map."""
    ch = _getch()
    return ch if ch.isprintable() else ""
