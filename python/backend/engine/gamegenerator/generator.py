"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator.prng import XorShiftPRNG
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

NUMBER_OF_SHUFFLES = 10

# Pre-recorded move sequences (Direction ordinals). Each one starts and
# ends with the blank in the top-left corner. Replaying them mixes the
# board far better than a short random walk would, and since they are
# legal moves from the goal state the result is always solvable.
_SHUFFLE_1 = (
    2, 1, 4, 1, 2, 3, 2, 1, 4, 1, 2, 3, 4, 2, 2, 1, 4, 4, 3, 2, 3, 2, 1, 4, 3,
    3, 4, 1, 1, 1, 4, 3, 2, 2, 3, 4, 1, 2, 1, 4, 3, 2, 3, 4, 3, 2, 1, 2, 3, 4,
    4, 1, 1, 4, 3, 2, 1, 3, 1, 4, 1, 2, 2, 2, 3, 4, 4, 3, 2, 1, 4, 4, 3, 2, 2,
    2, 3, 4, 1, 1, 4, 3, 3, 4, 1, 1, 2, 2, 3, 4, 1, 4, 1, 2, 2, 3, 4, 3, 2, 1,
    2, 1, 4, 3, 3, 4, 3, 2, 2, 1, 4, 3, 4, 4, 2, 2, 1, 1, 2, 1, 4, 4, 3, 3, 2,
    1, 4, 3, 2, 1, 4, 3, 4, 3, 2, 3, 1, 2, 3, 4, 1, 2, 3, 4, 1, 1, 4, 3, 2, 3,
    4,
)
_SHUFFLE_2 = (
    2, 2, 1, 4, 4, 2, 1, 1, 2, 3, 4, 3, 2, 2, 4, 3, 4, 1, 1, 1, 4, 3, 3, 2, 1,
    4, 3, 2, 2, 1, 4, 3, 2, 2, 1, 4, 1, 2, 3, 4, 4, 1, 3, 3, 2, 1, 4, 3, 3, 2,
    1, 4, 3, 4, 1, 1, 2, 1, 2, 3, 4, 3, 2, 2, 3, 4, 1, 1, 4, 2, 1, 2, 3, 4, 4,
    3, 4, 1, 3, 2, 3, 4, 1, 1, 2, 1, 4, 3, 2, 2, 3, 4, 1, 2, 3, 2, 1, 4, 3, 3,
    4, 4, 1, 1, 1, 2, 3, 4, 2, 2, 3, 4, 1, 2, 3, 4, 4, 3, 2, 2, 2, 1, 1, 1, 4,
    3, 3, 2, 3, 4, 1, 2, 1, 4, 1, 2, 3, 4, 4, 3, 4, 3,
)

SHUFFLES: tuple[tuple[Direction, ...], ...] = (
    tuple(Direction(d) for d in _SHUFFLE_1),
    tuple(Direction(d) for d in _SHUFFLE_2),
)


class GameGenerator:
    """Creates solvable puzzles by replaying shuffles from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board."""
        return Board.solved()

    @staticmethod
    def apply_shuffle(board: Board, sequence: tuple[Direction, ...]) -> None:
        """Replay *sequence* on *board*; moves into a wall are skipped."""
        for direction in sequence:
            board.slide(direction)

    @staticmethod
    def scramble(board: Board, prng: XorShiftPRNG) -> None:
        """Scramble *board* in-place with randomly picked shuffles."""
        for _ in range(NUMBER_OF_SHUFFLES):
            choice = prng.next_byte_below(len(SHUFFLES))
            logger.debug("Applying shuffle %d", choice)
            GameGenerator.apply_shuffle(board, SHUFFLES[choice])

        # Ensure the board is not already solved
        while board.is_solved():
            choice = prng.next_byte_below(len(SHUFFLES))
            logger.debug("Board came out solved, applying shuffle %d", choice)
            GameGenerator.apply_shuffle(board, SHUFFLES[choice])

    @staticmethod
    def generate(prng: XorShiftPRNG) -> Board:
        """Return a shuffled, solvable board."""
        board = GameGenerator.solved()
        GameGenerator.scramble(board, prng)
        logger.debug("Generated board %s", list(board.cells))
        return board
