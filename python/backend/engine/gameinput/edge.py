"""Turns asynchronous key-down notifications into per-frame key presses."""

from __future__ import annotations

from backend.models.board import Direction
from backend.models.keys import KEY_CODES, NO_KEYS, Key

# Checked in order; a later match overrides an earlier one.
_DIRECTION_KEYS: tuple[tuple[Key, Direction], ...] = (
    (Key.W | Key.UP_ARROW, Direction.UP),
    (Key.A | Key.LEFT_ARROW, Direction.LEFT),
    (Key.S | Key.DOWN_ARROW, Direction.DOWN),
    (Key.D | Key.RIGHT_ARROW, Direction.RIGHT),
)

DIRECTION_TO_KEY: dict[Direction, Key] = {
    Direction.UP: Key.W,
    Direction.LEFT: Key.A,
    Direction.DOWN: Key.S,
    Direction.RIGHT: Key.D,
}


def direction_for(pressed: Key) -> Direction:
    """Map a set of just-pressed keys to the move it requests."""
    direction = Direction.NONE
    for keys, candidate in _DIRECTION_KEYS:
        if pressed & keys:
            direction = candidate
    return direction


class InputEdgeDetector:
    """Edge-triggered keyboard state.

    Key-down notifications may arrive at any time between frames; they
    are OR-ed into a pending set that the next :meth:`poll` consumes.
    A key therefore counts as held for exactly one frame.
    """

    def __init__(self) -> None:
        self.key_down: Key = NO_KEYS
        self.key_down_last_frame: Key = NO_KEYS
        self.key_press: Key = NO_KEYS
        self._pending: Key = NO_KEYS

    @property
    def pending(self) -> Key:
        return self._pending

    def on_key_down(self, key: Key) -> None:
        self._pending |= key

    def on_key_code(self, key_code: int) -> None:
        """Accept a browser-style key code; unknown codes are ignored."""
        key = KEY_CODES.get(key_code)
        if key is not None:
            self.on_key_down(key)

    def poll(self) -> Key:
        """Advance one frame and return the keys pressed on this frame."""
        self.key_down_last_frame = self.key_down
        if self._pending:
            self.key_down = self._pending
            self._pending = NO_KEYS
        else:
            self.key_down = NO_KEYS
        self.key_press = self.key_down & ~self.key_down_last_frame
        return self.key_press
