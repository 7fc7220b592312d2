"""Logical keys understood by the puzzle."""

from __future__ import annotations

from enum import IntFlag


class Key(IntFlag):
    """One bit per logical key; a ``Key`` value is a whole key-state set."""

    W = 1 << 0
    A = 1 << 1
    S = 1 << 2
    D = 1 << 3
    UP_ARROW = 1 << 4
    LEFT_ARROW = 1 << 5
    DOWN_ARROW = 1 << 6
    RIGHT_ARROW = 1 << 7


NO_KEYS = Key(0)

# Browser ``KeyboardEvent.keyCode`` values.
KEY_CODES: dict[int, Key] = {
    87: Key.W,
    65: Key.A,
    83: Key.S,
    68: Key.D,
    38: Key.UP_ARROW,
    37: Key.LEFT_ARROW,
    40: Key.DOWN_ARROW,
    39: Key.RIGHT_ARROW,
}
