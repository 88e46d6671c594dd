"""Single-keypress input for the terminal frontends.

Arrow keys move a cell cursor, Enter/Space picks the cell under it,
and WASD slides a tile directly.  Works on macOS / Linux (tty+termios)
and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

# -- actions -------------------------------------------------------------------

CURSOR_ACTIONS = ("cursor_up", "cursor_down", "cursor_left", "cursor_right")
SLIDE_ACTIONS = ("slide_up", "slide_down", "slide_left", "slide_right")

_KEY_MAP: dict[str, str] = {
    "w": "slide_up",
    "s": "slide_down",
    "a": "slide_left",
    "d": "slide_right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "h": "help",
    "?": "help",
    " ": "select",
    "\r": "select",
    "\n": "select",
}

_ARROW_MAP: dict[str, str] = {
    "A": "cursor_up",
    "B": "cursor_down",
    "C": "cursor_right",
    "D": "cursor_left",
}

# Windows reports arrows as a 0xE0 / 0x00 prefix followed by a scan code.
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "cursor_up",
    "P": "cursor_down",
    "M": "cursor_right",
    "K": "cursor_left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), "")


# -- unix ----------------------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _resolve(ch)
        # ESC [ A/B/C/D, or a bare Escape
        if _next(0.1) != "[":
            return "quit"
        code = _next(0.1)
        return _ARROW_MAP.get(code or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- windows -------------------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROW_MAP.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "cursor_up" ... "cursor_right"  — arrow keys
        "slide_up" ... "slide_right"    — WASD
        "select"                        — Enter / Space
        "shuffle"                       — r
        "help"                          — h / ?
        "quit"                          — q / Ctrl-C / Escape
        ""                              — unmapped key
    """
    action = _read(None)
    assert action is not None
    return action


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key` but return ``None`` after *timeout* seconds."""
    return _read(timeout)
