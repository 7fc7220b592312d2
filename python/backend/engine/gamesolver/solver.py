"""Sliding puzzle solver."""

from __future__ import annotations

import heapq

from backend.models.board import GRID_DIMENSION, SOLVED_CELLS, Board, Direction

_MOVES = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


def _manhattan(cells: bytes) -> int:
    total = 0
    for index, tile in enumerate(cells):
        if tile == 0:
            continue
        row, col = divmod(index, GRID_DIMENSION)
        goal_row, goal_col = divmod(tile, GRID_DIMENSION)
        total += abs(row - goal_row) + abs(col - goal_col)
    return total


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a shortest move sequence solving *board*, or ``[]``.

        ``[]`` is returned both for a solved and for an unsolvable board.
        A* with the Manhattan-distance heuristic; the 3×3 state space is
        small enough to search exhaustively.
        """
        if board.is_solved() or not Solver.is_solvable(board):
            return []

        start = bytes(board.cells)
        came_from: dict[bytes, tuple[bytes, Direction] | None] = {start: None}
        cost: dict[bytes, int] = {start: 0}
        frontier: list[tuple[int, int, bytes]] = [(_manhattan(start), 0, start)]

        while frontier:
            _, g, cells = heapq.heappop(frontier)
            if cells == SOLVED_CELLS:
                break
            if g > cost[cells]:
                continue
            for direction in _MOVES:
                scratch = Board(cells=bytearray(cells))
                if not scratch.slide(direction):
                    continue
                nxt = bytes(scratch.cells)
                if nxt not in cost or g + 1 < cost[nxt]:
                    cost[nxt] = g + 1
                    came_from[nxt] = (cells, direction)
                    heapq.heappush(frontier, (g + 1 + _manhattan(nxt), g + 1, nxt))

        moves: list[Direction] = []
        step = came_from[SOLVED_CELLS]
        while step is not None:
            prev, direction = step
            moves.append(direction)
            step = came_from[prev]
        moves.reverse()
        return moves

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On an odd-width board a move never changes the parity of the
        number of inversions among the numbered tiles, and the goal has
        none.
        """
        flat = [v for v in board.cells if v != 0]
        inversions = sum(
            1
            for i in range(len(flat))
            for j in range(i + 1, len(flat))
            if flat[i] > flat[j]
        )
        return inversions % 2 == 0
