"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the live board, move counter, and the tiles moved so far."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.history: list[int] = []

    # -- moves ----------------------------------------------------------------

    def record(self, tile: int, board: Board) -> None:
        """Replace the live board after *tile* has slid."""
        self.board = board
        self.history.append(tile)
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
