"""Core gameplay logic: applies moves and checks the win condition."""

from __future__ import annotations

import logging

from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.errors import IllegalMove

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session on a live board.

    The live board is only ever replaced through ``apply``, which is shared
    by interactive play and solution replay.
    """

    def __init__(self, board: Board) -> None:
        self.size = board.size
        self.state = GameState(board)

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement -------------------------------------------------------------

    def apply(self, tile: int) -> Board:
        """Slide *tile* into the adjacent blank.

        Raises ``IllegalMove`` if the tile is not next to the blank.
        """
        board = self.state.board.apply_move(tile)
        logger.debug("[Move] %d", tile)
        self.state.record(tile, board)
        return board

    def move_tile(self, tile: int) -> bool:
        """Interactive variant of ``apply``.

        Returns True if the tile was adjacent to the blank and the move
        was applied; an illegal request is ignored.
        """
        try:
            self.apply(tile)
        except IllegalMove:
            return False
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
