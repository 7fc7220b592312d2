"""Core gameplay logic — processes moves, runs frames and checks the win."""

from __future__ import annotations

import enum
import logging

from backend.engine.gamegenerator import GameGenerator, XorShiftPRNG
from backend.engine.gameinput import InputEdgeDetector, direction_for
from backend.engine.gamerender import GeometryBuilder, Layout
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction
from backend.models.geometry import Frame
from backend.models.keys import Key

logger = logging.getLogger(__name__)

DEFAULT_CANVAS = (800, 800)
DEFAULT_QUOTE_SIZE = (480, 120)


class MoveResult(enum.Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"  # pushed into a wall
    IGNORED = "ignored"  # no direction, or the puzzle is already solved


class GamePlay:
    """Orchestrates a single game session, one frame at a time."""

    def __init__(
        self,
        seed: int,
        now: float = 0.0,
        layout: Layout | None = None,
        quote_size: tuple[int, int] = DEFAULT_QUOTE_SIZE,
    ) -> None:
        board = GameGenerator.generate(XorShiftPRNG(seed))
        self._setup(board, now, layout, quote_size)

    @classmethod
    def from_clock(
        cls,
        seconds: float,
        now: float | None = None,
        layout: Layout | None = None,
        quote_size: tuple[int, int] = DEFAULT_QUOTE_SIZE,
    ) -> GamePlay:
        """Start a game seeded from a clock reading taken at *seconds*.

        *now* is the frame-clock time the game starts at; it defaults to
        *seconds* when the same clock drives both.
        """
        board = GameGenerator.generate(XorShiftPRNG.from_clock(seconds))
        return cls.from_board(
            board,
            now=seconds if now is None else now,
            layout=layout,
            quote_size=quote_size,
        )

    @classmethod
    def from_board(
        cls,
        board: Board,
        now: float = 0.0,
        layout: Layout | None = None,
        quote_size: tuple[int, int] = DEFAULT_QUOTE_SIZE,
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj._setup(board, now, layout, quote_size)
        return obj

    def _setup(
        self,
        board: Board,
        now: float,
        layout: Layout | None,
        quote_size: tuple[int, int],
    ) -> None:
        self.state = GameState(board, now)
        self.input = InputEdgeDetector()
        self.geometry = GeometryBuilder(layout or Layout(*DEFAULT_CANVAS), quote_size)

    # -- input ----------------------------------------------------------------

    def on_key_down(self, key: Key) -> None:
        self.input.on_key_down(key)

    def on_key_code(self, key_code: int) -> None:
        self.input.on_key_code(key_code)

    # -- movement (direction = where the *tile* moves) ------------------------

    def try_move(self, direction: Direction) -> MoveResult:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Pushing into a wall cancels the sliding animation; a solved
        board is frozen.
        """
        state = self.state
        target = state.board.swap_index(direction)

        if target is None:
            if direction is Direction.NONE:
                return MoveResult.IGNORED
            state.cancel_slide()
            logger.debug("Rejected move %s", direction.name)
            return MoveResult.REJECTED

        if state.is_won or state.board.is_solved():
            return MoveResult.IGNORED

        tile = state.board.slide(direction)
        state.start_slide(tile, direction)
        state.increment_moves()
        return MoveResult.ACCEPTED

    # -- frame loop -----------------------------------------------------------

    def step(self, now: float) -> Frame:
        """Run one frame at time *now* (seconds) and return its geometry."""
        state = self.state
        pressed = self.input.poll()
        direction = direction_for(pressed)

        if pressed:
            state.restart_tile_animation(now)
        state.update_tile_animation(now)

        self.try_move(direction)

        if state.check_won(now):
            logger.info(
                "Puzzle solved in %d moves (%.1fs)", state.moves, state.elapsed_time
            )
        state.update_won_animation(now)

        return self.geometry.build(state)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_won
