"""Cross-platform single-keypress reader for CLI frontends.

Handles digit/letter choices and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        # os.read is unbuffered, so select sees the rest of an escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b":
            # Arrow keys arrive as ESC [ A/B/C/D; a bare Escape has nothing behind it.
            while len(ch) < 3 and select.select([fd], [], [], 0.1)[0]:
                ch += os.read(fd, 1).decode("utf-8", errors="ignore")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "p": "pause",
    "P": "pause",
    " ": "pause",
    "r": "restart",
    "R": "restart",
    "m": "menu",
    "M": "menu",
    "b": "back",
    "B": "back",
    "\x7f": "back",  # Backspace
    "y": "yes",
    "Y": "yes",
    "n": "no",
    "N": "no",
    "\r": "enter",
    "\n": "enter",
}

# Letter aliases for the four answer slots.
_ANSWER_MAP: dict[str, str] = {"a": "1", "b": "2", "c": "3", "d": "4"}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "quit"                         — q / Ctrl-C / Escape
        "pause"                        — p / Space
        "restart"                      — r
        "menu"                         — m
        "back"                         — b / Backspace
        "yes", "no"                    — y / n
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char (digits)
        ""                             — unrecognised key
    """
    ch = _getch()
    if ch.startswith("\x1b"):
        return _escape_action(ch)
    return _resolve(ch)


def get_answer_key() -> str:
    """Like ``get_key`` but maps ``a``-``d`` to the answer slots ``1``-``4``.

    Escape pauses instead of quitting.
    """
    ch = _getch()
    if ch.lower() in _ANSWER_MAP:
        return _ANSWER_MAP[ch.lower()]
    if ch.startswith("\x1b"):
        return "pause" if _escape_action(ch) == "quit" else ""
    return _resolve(ch)


def _escape_action(seq: str) -> str:
    # Arrow keys and other escape sequences are ignored.
    return "quit" if seq == "\x1b" else ""


def get_yes_no() -> bool:
    """Block until the player presses y or n (Enter counts as yes)."""
    while True:
        key = get_key()
        if key in ("yes", "enter"):
            return True
        if key in ("no", "quit"):
            return False


def read_line(prompt: str) -> str:
    """Read a full line in cooked mode (used for username entry)."""
    try:
        return input(prompt)
    except EOFError:
        return ""
