"""Board model tests."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Direction, GridInvariantError


def test_solved_board() -> None:
    board = Board.solved()
    assert list(board.cells) == list(range(9))
    assert board.is_solved()
    assert board.blank_index == 0
    assert all(board.is_tile_correct(i) for i in range(9))


def test_rows() -> None:
    board = Board.from_flat([8, 1, 2, 3, 4, 5, 6, 7, 0])
    assert board.rows() == [[8, 1, 2], [3, 4, 5], [6, 7, 0]]
    assert board.tile_at(2, 2) == 0
    assert board.tile_at(0, 0) == 8


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2, 3, 4, 5, 6, 7],
        [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],
        [1, 1, 2, 3, 4, 5, 6, 7, 8],
        [0, 1, 2, 3, 4, 5, 6, 7, 9],
    ],
)
def test_from_flat_rejects_bad_boards(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(flat)


def test_missing_blank_is_an_invariant_error() -> None:
    board = Board(cells=bytearray([1, 1, 2, 3, 4, 5, 6, 7, 8]))
    with pytest.raises(GridInvariantError):
        _ = board.blank_index


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected_tile, expected_cells",
    [
        (Direction.UP, 3, [3, 1, 2, 0, 4, 5, 6, 7, 8]),
        (Direction.LEFT, 1, [1, 0, 2, 3, 4, 5, 6, 7, 8]),
        (Direction.DOWN, 0, list(range(9))),
        (Direction.RIGHT, 0, list(range(9))),
        (Direction.NONE, 0, list(range(9))),
    ],
)
def test_slide_from_corner(
    direction: Direction, expected_tile: int, expected_cells: list[int]
) -> None:
    board = Board.solved()
    assert board.slide(direction) == expected_tile
    assert list(board.cells) == expected_cells


def test_slide_left_moves_right_neighbour() -> None:
    board = Board.from_flat([1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert board.slide(Direction.LEFT) == 2
    assert list(board.cells) == [1, 2, 0, 3, 4, 5, 6, 7, 8]


def test_every_direction_from_centre() -> None:
    start = [1, 2, 3, 4, 0, 5, 6, 7, 8]
    expected = {
        Direction.UP: (7, 7),
        Direction.LEFT: (5, 5),
        Direction.DOWN: (1, 2),
        Direction.RIGHT: (3, 4),
    }
    for direction, (target, tile) in expected.items():
        board = Board.from_flat(start)
        assert board.swap_index(direction) == target
        assert board.slide(direction) == tile
        assert board.blank_index == target


def test_wall_moves_are_noops() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert board.swap_index(Direction.UP) is None
    assert board.swap_index(Direction.LEFT) is None
    for _ in range(3):
        assert board.slide(Direction.UP) == 0
    assert list(board.cells) == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_copy_is_independent() -> None:
    board = Board.solved()
    clone = board.copy()
    clone.slide(Direction.UP)
    assert board.is_solved()
    assert not clone.is_solved()
