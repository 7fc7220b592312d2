"""Board model for the 3×3 sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GRID_DIMENSION = 3
TILE_NUMBER = GRID_DIMENSION * GRID_DIMENSION
SOLVED_CELLS = bytes(range(TILE_NUMBER))


class GridInvariantError(RuntimeError):
    """The board no longer holds exactly one of each value ``0..8``."""


class Direction(IntEnum):
    """Direction a tile is pushed into the blank.

    The ordinals double as the encoding of the pre-recorded shuffles.
    """

    NONE = 0
    UP = 1
    LEFT = 2
    DOWN = 3
    RIGHT = 4


# Offset from the blank to the tile that slides into it.
# UP    → the tile below the blank moves up
# LEFT  → the tile right of the blank moves left
# DOWN  → the tile above the blank moves down
# RIGHT → the tile left of the blank moves right
_SWAP_OFFSETS: dict[Direction, int] = {
    Direction.UP: GRID_DIMENSION,
    Direction.LEFT: 1,
    Direction.DOWN: -GRID_DIMENSION,
    Direction.RIGHT: -1,
}


@dataclass
class Board:
    """The puzzle grid, stored row-major from the top-left corner.

    ``cells[i]`` is the tile at row ``i // 3``, column ``i % 3``;
    0 represents the blank.
    """

    cells: bytearray

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return the goal board ``0, 1, …, 8`` (blank top-left)."""
        return cls(cells=bytearray(SOLVED_CELLS))

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 0, 2, 3, 4, 5, 6, 7, 8])
        """
        if len(flat) != TILE_NUMBER:
            raise ValueError(
                f"Expected {TILE_NUMBER} tiles for a "
                f"{GRID_DIMENSION}×{GRID_DIMENSION} board, got {len(flat)}."
            )
        if sorted(flat) != list(range(TILE_NUMBER)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{TILE_NUMBER - 1}, "
                f"got {list(flat)}."
            )
        return cls(cells=bytearray(flat))

    # -- queries --------------------------------------------------------------

    def find_tile(self, tile: int) -> int | None:
        """Index of *tile*, or ``None`` when it is not on the board."""
        for index, value in enumerate(self.cells):
            if value == tile:
                return index
        return None

    @property
    def blank_index(self) -> int:
        index = self.find_tile(0)
        if index is None:
            raise GridInvariantError(f"No blank on board {list(self.cells)}")
        return index

    def tile_at(self, row: int, col: int) -> int:
        return self.cells[row * GRID_DIMENSION + col]

    def rows(self) -> list[list[int]]:
        return [
            list(self.cells[r * GRID_DIMENSION : (r + 1) * GRID_DIMENSION])
            for r in range(GRID_DIMENSION)
        ]

    def is_solved(self) -> bool:
        return self.cells == SOLVED_CELLS

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits in its goal position."""
        return self.cells[index] == index

    def swap_index(self, direction: Direction) -> int | None:
        """Index of the tile that *direction* pushes into the blank.

        ``None`` when the move runs into a wall (or is ``NONE``).
        """
        blank = self.blank_index
        row, col = divmod(blank, GRID_DIMENSION)
        blocked = {
            Direction.NONE: True,
            Direction.UP: row == GRID_DIMENSION - 1,
            Direction.LEFT: col == GRID_DIMENSION - 1,
            Direction.DOWN: row == 0,
            Direction.RIGHT: col == 0,
        }[direction]
        if blocked:
            return None
        return blank + _SWAP_OFFSETS[direction]

    # -- mutation -------------------------------------------------------------

    def slide(self, direction: Direction) -> int:
        """Push a tile into the blank; return its value, or 0 for a no-op."""
        target = self.swap_index(direction)
        if target is None:
            return 0
        blank = self.blank_index
        tile = self.cells[target]
        self.cells[blank] = tile
        self.cells[target] = 0
        return tile

    def copy(self) -> Board:
        return Board(cells=bytearray(self.cells))
