"""Manhattan heuristic tests."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver.heuristic import manhattan
from backend.models.board import Board


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_goal_is_zero(size: int) -> None:
    assert manhattan(Board.goal(size)) == 0


def test_known_values() -> None:
    assert manhattan(Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])) == 1
    assert manhattan(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])) == 2
    # 8 and 1 trade places: 3 + 3.
    assert manhattan(Board.from_flat([8, 2, 3, 4, 5, 6, 7, 1, 0])) == 6


def test_blank_contributes_nothing() -> None:
    a = Board.from_flat([1, 2, 3, 0])
    b = Board.from_flat([1, 2, 0, 3])
    assert manhattan(a) == 0
    assert manhattan(b) == 1


@pytest.mark.parametrize("seed", range(5))
def test_non_negative_and_consistent(random_walk, seed: int) -> None:
    board = random_walk(4, 60, seed)
    for _ in range(40):
        h = manhattan(board)
        assert h >= 0
        neighbours = board.neighbors()
        for _, nxt in neighbours:
            assert abs(manhattan(nxt) - h) <= 1
        board = neighbours[seed % len(neighbours)][1]
