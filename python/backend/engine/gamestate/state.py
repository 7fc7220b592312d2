"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import enum

from backend.models.board import Board, Direction

ANIMATION_SLIDING_TILE_TIME = 0.15
ANIMATION_WON_TIME = 3.0
ANIMATION_QUOTE_TIME = 3.0
# Tolerance on the slide end for clock rounding.
TIME_EPSILON = 1e-9
# The quote starts fading in this long before the win fade completes.
QUOTE_OVERLAP_TIME = 1.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Phase(enum.Enum):
    IDLE = "idle"
    SLIDING = "sliding"
    WON_FADING = "won_fading"
    QUOTE_FADING = "quote_fading"
    SETTLED = "settled"


class GameState:
    """Holds the board, the move counter and every animation timer.

    All times are seconds on the clock handed to :meth:`GamePlay.step`.
    """

    def __init__(self, board: Board, now: float = 0.0) -> None:
        self.board = board
        self.moves: int = 0

        self.is_won: bool = False
        self.current_time: float = now
        self.started_time: float = now
        self.animation_start_time: float = now
        self.won_start_time: float | None = None

        self.animating_tile: int = 0
        self.animation_direction: Direction = Direction.NONE

        self.tile_fraction: float = 0.0
        self.won_fraction: float = 0.0
        self.quote_fraction: float = 0.0

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        """Play time so far; frozen once the puzzle is solved."""
        end = self.won_start_time if self.won_start_time is not None else self.current_time
        return end - self.started_time

    def restart_tile_animation(self, now: float) -> None:
        self.animation_start_time = now

    def update_tile_animation(self, now: float) -> None:
        """Advance the sliding tile, retiring it once its slide is over."""
        self.current_time = now
        elapsed = now - self.animation_start_time
        self.tile_fraction = _clamp(elapsed / ANIMATION_SLIDING_TILE_TIME, 0.0, 1.0)
        if elapsed > ANIMATION_SLIDING_TILE_TIME + TIME_EPSILON:
            self.cancel_slide()

    def check_won(self, now: float) -> bool:
        """Latch the win on the first solved frame; True only on that frame."""
        if self.is_won or not self.board.is_solved():
            return False
        self.is_won = True
        self.won_start_time = now
        return True

    def update_won_animation(self, now: float) -> None:
        if not self.is_won or self.won_start_time is None:
            return
        since_won = now - self.won_start_time
        self.won_fraction = (
            _clamp(since_won, 0.0, ANIMATION_WON_TIME) / ANIMATION_WON_TIME
        )
        self.quote_fraction = (
            _clamp(
                since_won - ANIMATION_WON_TIME + QUOTE_OVERLAP_TIME,
                0.0,
                ANIMATION_QUOTE_TIME,
            )
            / ANIMATION_QUOTE_TIME
        )

    # -- sliding tile ---------------------------------------------------------

    def start_slide(self, tile: int, direction: Direction) -> None:
        self.animating_tile = tile
        self.animation_direction = direction

    def cancel_slide(self) -> None:
        self.animating_tile = 0
        self.animation_direction = Direction.NONE

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def phase(self) -> Phase:
        if self.is_won:
            if self.won_fraction < 1.0:
                return Phase.WON_FADING
            if self.quote_fraction < 1.0:
                return Phase.QUOTE_FADING
            return Phase.SETTLED
        if self.animating_tile:
            return Phase.SLIDING
        return Phase.IDLE
