"""Non-blocking single-keypress reader for the terminal frontend.

Reads one key per frame without requiring Enter and maps it to an
action name. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

from backend.models.keys import Key

_ACTIONS: dict[str, str] = {
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\x1b": "quit",  # bare Escape
    "r": "restart",
    "n": "hint",
    "w": "w",
    "a": "a",
    "s": "s",
    "d": "d",
}

# Final byte of the ANSI arrow sequences ESC [ A/B/C/D.
_ANSI_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}
# Second byte after the 0xE0 / 0x00 prefix msvcrt reports for arrows.
_WINDOWS_ARROWS: dict[str, str] = {"H": "up", "P": "down", "M": "right", "K": "left"}

# Action names that correspond to one of the puzzle's logical keys.
LOGICAL_KEYS: dict[str, Key] = {
    "w": Key.W,
    "a": Key.A,
    "s": Key.S,
    "d": Key.D,
    "up": Key.UP_ARROW,
    "left": Key.LEFT_ARROW,
    "down": Key.DOWN_ARROW,
    "right": Key.RIGHT_ARROW,
}


def _action(ch: str) -> str:
    return _ACTIONS.get(ch.lower(), "")


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
            return _action(ch)
        time.sleep(0.005)
    return None


def _read_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_ready(wait: float) -> str | None:
        # os.read is unbuffered, so select sees the rest of an escape sequence.
        ready, _, _ = select.select([fd], [], [], wait)
        return os.read(fd, 1).decode("utf-8", errors="ignore") if ready else None

    try:
        tty.setraw(fd)
        ch = read_ready(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            if read_ready(0.05) == "[":
                return _ANSI_ARROWS.get(read_ready(0.05) or "", "")
        return _action(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns ``None`` when no key arrived, otherwise one of
    ``"w" "a" "s" "d"``, ``"up" "down" "left" "right"``, ``"quit"``
    (q / Escape / Ctrl-C), ``"restart"`` (r), ``"hint"`` (n) or ``""``
    for any other key.
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)
