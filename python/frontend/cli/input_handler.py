"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD and the action letters are read without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from enum import StrEnum


class Key(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SCRAMBLE = "scramble"
    QUICK_SCRAMBLE = "quick_scramble"
    CLICK = "click"
    SOLVE = "solve"
    HINT = "hint"
    RESET = "reset"
    QUIT = "quit"
    NONE = ""


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


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, Key] = {
    "w": Key.UP,
    "s": Key.DOWN,
    "a": Key.LEFT,
    "d": Key.RIGHT,
    "r": Key.SCRAMBLE,
    "e": Key.QUICK_SCRAMBLE,
    "c": Key.CLICK,
    "v": Key.SOLVE,
    "n": Key.HINT,
    "0": Key.RESET,
    "q": Key.QUIT,
    "\x03": Key.QUIT,  # Ctrl-C
}

_ARROW_MAP: dict[str, Key] = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
}


def resolve(ch: str) -> Key:
    """Map a raw character to its action."""
    return _KEY_MAP.get(ch.lower(), Key.NONE)


def get_key() -> Key:
    """Block until a key is pressed and return the mapped action."""
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), Key.NONE)
        return Key.QUIT  # bare Escape

    return resolve(ch)
