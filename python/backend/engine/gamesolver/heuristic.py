"""Manhattan distance heuristic."""

from __future__ import annotations

from functools import lru_cache

from backend.models.board import BLANK, Board


@lru_cache(maxsize=None)
def _goal_positions(size: int) -> tuple[tuple[int, int], ...]:
    """Goal ``(column, row)`` of every tile label, indexed by label."""
    positions = [(size - 1, size - 1)]  # blank, never used
    for label in range(1, size * size):
        idx = label - 1
        positions.append((idx % size, idx // size))
    return tuple(positions)


def manhattan(board: Board) -> int:
    """Sum of grid distances of each tile from its goal slot.

    Admissible and consistent: one slide changes the value by exactly 1.
    """
    n = board.size
    goal = _goal_positions(n)
    dist = 0
    for idx, tile in enumerate(board.tiles):
        if tile == BLANK:
            continue
        gc, gr = goal[tile]
        dist += abs(idx % n - gc) + abs(idx // n - gr)
    return dist
