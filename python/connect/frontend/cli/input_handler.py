"""Keypress reader for the terminal game.

Turns raw keys into the few actions the game understands: cursor
movement, tapping the tile under the cursor, new game, and quit.
"""

from __future__ import annotations

import os
import sys
from typing import Callable

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}

_ESC_WAIT = 0.1  # seconds to wait for the rest of an arrow-key sequence


def decode(read: Callable[[], str | None]) -> str:
    """Decode one key from *read* into an action.

    *read* returns the next character, or ``None`` when the rest of an
    escape sequence does not arrive.  A bare Escape means quit.
    """
    ch = read()
    if ch != "\x1b":
        return _KEY_MAP.get((ch or "").lower(), "")
    if read() != "[":
        return "quit"
    return _ARROW_MAP.get(read() or "", "")


# -- platform readers ----------------------------------------------------------


def _windows_key(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    return decode(lambda: msvcrt.getwch())


def _unix_key(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_within(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        first = read_within(timeout)
        if first is None:
            return None
        pending = [first]
        return decode(lambda: pending.pop() if pending else read_within(_ESC_WAIT))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_read_key = _windows_key if os.name == "nt" else _unix_key


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action ("" if unmapped)."""
    return _read_key(None) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return ``None`` after *timeout* seconds idle."""
    return _read_key(timeout)
