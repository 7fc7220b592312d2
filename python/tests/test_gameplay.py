"""Game session tests: moves, animation timers and the win sequence."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay.game import GamePlay, MoveResult
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import Phase
from backend.models.board import Board, Direction
from backend.models.keys import Key

ONE_AWAY = [1, 0, 2, 3, 4, 5, 6, 7, 8]


# -- moves --------------------------------------------------------------------


def test_wall_move_clears_marker_and_keeps_board() -> None:
    game = GamePlay.from_board(Board.solved(), now=5.0)
    game.state.start_slide(3, Direction.UP)

    assert game.try_move(Direction.RIGHT) is MoveResult.REJECTED
    assert list(game.state.board.cells) == list(range(9))
    assert game.state.animating_tile == 0
    assert game.state.animation_direction is Direction.NONE
    # Only a key press restarts the slide timer.
    assert game.state.animation_start_time == 5.0
    assert game.state.moves == 0


def test_no_direction_is_ignored() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    game.state.start_slide(2, Direction.LEFT)
    assert game.try_move(Direction.NONE) is MoveResult.IGNORED
    assert game.state.animating_tile == 2


def test_accepted_move() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    assert game.try_move(Direction.LEFT) is MoveResult.ACCEPTED
    assert list(game.state.board.cells) == [1, 2, 0, 3, 4, 5, 6, 7, 8]
    assert game.state.animating_tile == 2
    assert game.state.animation_direction is Direction.LEFT
    assert game.state.moves == 1


def test_repeated_wall_moves_change_nothing() -> None:
    game = GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0]))
    for _ in range(5):
        assert game.try_move(Direction.LEFT) is MoveResult.REJECTED
    assert list(game.state.board.cells) == [1, 2, 3, 4, 5, 6, 7, 8, 0]
    assert game.state.moves == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_play_keeps_tiles_and_solvability(seed: int) -> None:
    rng = random.Random(seed)
    game = GamePlay(seed + 100)
    directions = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
    for _ in range(500):
        if game.is_won:
            break
        game.try_move(rng.choice(directions))
        assert sorted(game.state.board.cells) == list(range(9))
        assert Solver.is_solvable(game.state.board)


# -- frame loop ---------------------------------------------------------------


def test_key_press_moves_on_next_step() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    game.on_key_down(Key.A)
    game.step(0.0)
    assert list(game.state.board.cells) == [1, 2, 0, 3, 4, 5, 6, 7, 8]
    assert game.state.phase is Phase.SLIDING

    # Holding the key does not repeat the move.
    game.on_key_down(Key.A)
    game.step(0.02)
    assert list(game.state.board.cells) == [1, 2, 0, 3, 4, 5, 6, 7, 8]
    assert game.state.moves == 1


def test_key_codes_reach_the_game() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    game.on_key_code(37)  # left arrow
    game.step(0.0)
    assert game.state.animating_tile == 2


def test_slide_fraction_over_time() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY), now=0.0)
    game.on_key_down(Key.A)
    game.step(0.0)
    state = game.state
    assert state.tile_fraction == 0.0

    fractions = [state.tile_fraction]
    for now in (0.03, 0.075, 0.12):
        game.step(now)
        fractions.append(state.tile_fraction)
    assert fractions == sorted(fractions)
    assert fractions[2] == pytest.approx(0.5)

    game.step(0.15)
    assert state.tile_fraction == pytest.approx(1.0)
    assert state.animating_tile == 2

    game.step(0.2)
    assert state.tile_fraction == 1.0
    assert state.animating_tile == 0
    assert state.phase is Phase.IDLE


def test_key_press_restarts_slide_timer() -> None:
    game = GamePlay.from_board(Board.from_flat([1, 2, 0, 3, 4, 5, 6, 7, 8]))
    game.step(10.0)
    game.on_key_down(Key.D)
    game.step(10.5)
    assert game.state.animation_start_time == 10.5
    assert game.state.tile_fraction == 0.0
    assert game.state.animating_tile == 2


def test_win_sequence() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY), now=8.0)
    game.on_key_down(Key.D)
    game.step(10.0)
    state = game.state

    assert state.board.is_solved()
    assert game.is_won
    assert state.won_start_time == 10.0
    assert state.elapsed_time == 2.0
    assert state.won_fraction == 0.0
    assert state.phase is Phase.WON_FADING

    game.step(11.5)
    assert state.won_fraction == pytest.approx(0.5)
    assert state.quote_fraction == 0.0

    game.step(12.5)
    assert state.won_fraction == pytest.approx(2.5 / 3)
    assert state.quote_fraction == pytest.approx(0.5 / 3)

    game.step(14.0)
    assert state.won_fraction == 1.0
    assert state.quote_fraction == pytest.approx(2 / 3)
    assert state.phase is Phase.QUOTE_FADING

    game.step(16.0)
    assert state.quote_fraction == 1.0
    assert state.phase is Phase.SETTLED
    # Play time stops at the win.
    assert state.elapsed_time == 2.0


def test_board_frozen_after_win() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    game.on_key_down(Key.D)
    game.step(0.0)
    assert game.is_won

    assert game.try_move(Direction.UP) is MoveResult.IGNORED
    game.on_key_down(Key.LEFT_ARROW)
    game.step(0.5)
    assert game.state.board.is_solved()
    assert game.state.moves == 1


def test_fractions_never_decrease_after_win() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    game.on_key_down(Key.D)
    game.step(0.0)
    won, quote = [], []
    for i in range(1, 80):
        if i % 7 == 0:
            game.on_key_down(Key.W)
        game.step(i * 0.1)
        won.append(game.state.won_fraction)
        quote.append(game.state.quote_fraction)
    assert won == sorted(won)
    assert quote == sorted(quote)
    assert won[-1] == 1.0
    assert quote[-1] == 1.0


def test_solved_start_is_won_on_first_step() -> None:
    game = GamePlay.from_board(Board.solved(), now=3.0)
    assert not game.is_won
    game.step(3.0)
    assert game.is_won


def test_seeded_games_match() -> None:
    a = GamePlay(31337)
    b = GamePlay(31337)
    assert a.state.board == b.state.board
    assert not a.state.board.is_solved()


def test_step_returns_frame() -> None:
    game = GamePlay(5)
    frame = game.step(0.0)
    assert len(frame.batches) == 2


def test_solved_board_ignores_moves_before_first_step() -> None:
    game = GamePlay.from_board(Board.solved())
    assert game.try_move(Direction.LEFT) is MoveResult.IGNORED
    assert game.try_move(Direction.UP) is MoveResult.IGNORED
    assert game.state.board.is_solved()
    assert game.state.moves == 0


def test_key_on_first_step_of_solved_board_is_ignored() -> None:
    game = GamePlay.from_board(Board.solved(), now=1.0)
    game.on_key_down(Key.A)
    game.step(1.0)
    assert game.state.board.is_solved()
    assert game.is_won
    assert game.state.moves == 0


def test_slide_end_frame_keeps_tile_at_late_start() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY), now=10.0)
    game.on_key_down(Key.A)
    game.step(10.0)

    game.step(10.15)
    assert game.state.tile_fraction == 1.0
    assert game.state.animating_tile == 2

    game.step(10.2)
    assert game.state.animating_tile == 0
