"""Game session and solution replay tests."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay, SolutionReplay
from backend.engine.gamesolver.solver import solve_board
from backend.models.board import Board
from backend.models.errors import IllegalMove

SEVEN_MOVES = Board.from_rows([[4, 1, 2], [7, 5, 3], [8, 0, 6]])


# -- GamePlay -----------------------------------------------------------------


def test_apply_updates_live_board_and_counters() -> None:
    game = GamePlay(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))

    game.apply(7)

    assert game.board == Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert game.state.moves == 1
    assert game.state.history == [7]
    assert not game.is_won

    game.apply(8)
    assert game.is_won


def test_illegal_click_is_ignored() -> None:
    start = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
    game = GamePlay(start)

    assert game.move_tile(1) is False
    assert game.move_tile(99) is False
    assert game.board == start
    assert game.state.moves == 0


def test_apply_raises_on_illegal_move() -> None:
    game = GamePlay(Board.goal(3))
    with pytest.raises(IllegalMove):
        game.apply(1)


# -- SolutionReplay -----------------------------------------------------------


def test_replay_applies_solution_in_order() -> None:
    moves = solve_board(SEVEN_MOVES).moves
    game = GamePlay(SEVEN_MOVES)
    seen: list[tuple[int, int]] = []
    sleeps: list[float] = []
    completed: list[bool] = []

    finished = SolutionReplay(game, moves).run(
        0.3,
        on_move=lambda i, tile: seen.append((i, tile)),
        on_complete=lambda: completed.append(True),
        sleep=sleeps.append,
    )

    assert finished is True
    assert seen == list(enumerate(moves))
    assert sleeps == [0.3] * len(moves)
    assert completed == [True]
    assert game.is_won
    assert game.state.history == moves


def test_replay_step_by_step() -> None:
    game = GamePlay(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    replay = SolutionReplay(game, [7, 8])

    assert replay.step() == 7
    assert not replay.done
    assert replay.step() == 8
    assert replay.done
    assert game.is_won
    with pytest.raises(IndexError):
        replay.step()


def test_replay_of_empty_solution_completes() -> None:
    completed: list[bool] = []
    game = GamePlay(Board.goal(3))

    assert SolutionReplay(game, []).run(0.0, on_complete=lambda: completed.append(True))
    assert completed == [True]


def test_replay_stop_halts_after_current_move() -> None:
    game = GamePlay(SEVEN_MOVES)
    replay = SolutionReplay(game, solve_board(SEVEN_MOVES).moves)
    completed: list[bool] = []

    def _on_move(index: int, tile: int) -> None:
        if index == 2:
            replay.stop()

    finished = replay.run(
        0.0, on_move=_on_move, on_complete=lambda: completed.append(True),
        sleep=lambda s: None,
    )

    assert finished is False
    assert replay.index == 3
    assert game.state.moves == 3
    assert completed == []


def test_replay_rejects_illegal_move() -> None:
    game = GamePlay(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    replay = SolutionReplay(game, [7, 1])

    with pytest.raises(IllegalMove):
        replay.run(0.0, sleep=lambda s: None)
    assert game.state.moves == 1
