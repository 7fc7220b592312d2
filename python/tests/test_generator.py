"""Board generator tests."""

from __future__ import annotations

import pytest

from backend.engine.gamegenerator import generator
from backend.engine.gamegenerator.generator import SHUFFLES, GameGenerator
from backend.engine.gamegenerator.prng import XorShiftPRNG
from backend.models.board import Board, Direction


class _ScriptedPRNG(XorShiftPRNG):
    __slots__ = ("_bytes",)

    def __init__(self, values: list[int]) -> None:
        super().__init__(0)
        self._bytes = iter(values)

    def next_byte(self) -> int:
        return next(self._bytes)


def test_shuffle_tables() -> None:
    assert len(SHUFFLES) == 2
    assert len(SHUFFLES[0]) == 151
    assert len(SHUFFLES[1]) == 142
    assert all(d is not Direction.NONE for seq in SHUFFLES for d in seq)


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, [0, 3, 8, 6, 4, 7, 1, 5, 2]),
        (1, [0, 3, 1, 6, 4, 7, 8, 2, 5]),
    ],
)
def test_single_shuffle_from_solved(index: int, expected: list[int]) -> None:
    board = Board.solved()
    GameGenerator.apply_shuffle(board, SHUFFLES[index])
    assert list(board.cells) == expected


def test_shuffles_compose() -> None:
    board = Board.solved()
    GameGenerator.apply_shuffle(board, SHUFFLES[0])
    GameGenerator.apply_shuffle(board, SHUFFLES[1])
    assert list(board.cells) == [0, 6, 3, 1, 4, 5, 2, 8, 7]


def test_zero_seed_picks_first_shuffle_every_time() -> None:
    board = GameGenerator.generate(XorShiftPRNG(0))
    assert list(board.cells) == [0, 3, 2, 6, 4, 5, 1, 7, 8]


def test_solved_result_is_shuffled_again(monkeypatch: pytest.MonkeyPatch) -> None:
    # The first shuffle has order 6, so six of them give back the goal.
    monkeypatch.setattr(generator, "NUMBER_OF_SHUFFLES", 6)
    board = GameGenerator.generate(_ScriptedPRNG([0] * 6 + [1]))
    assert list(board.cells) == [0, 3, 1, 6, 4, 7, 8, 2, 5]


@pytest.mark.parametrize("seed", [1, 7, 99, 2**40 + 3])
def test_generated_board_properties(seed: int) -> None:
    board = GameGenerator.generate(XorShiftPRNG(seed))
    assert sorted(board.cells) == list(range(9))
    assert not board.is_solved()
    assert board.blank_index == 0


def test_generation_is_deterministic() -> None:
    a = GameGenerator.generate(XorShiftPRNG(2024))
    b = GameGenerator.generate(XorShiftPRNG(2024))
    assert a == b


def test_clock_seeded_generation() -> None:
    a = GameGenerator.generate(XorShiftPRNG.from_clock(1_700_000_000.25))
    b = GameGenerator.generate(XorShiftPRNG.from_clock(1_700_000_000.25))
    assert a == b
    assert not a.is_solved()
