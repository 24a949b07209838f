"""Replays a solution on a live game, one move at a time."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence

from backend.engine.gameplay.game import GamePlay

logger = logging.getLogger(__name__)


class SolutionReplay:
    """Feeds solution moves to ``GamePlay.apply`` in order.

    Moves are never reordered or skipped; an illegal move raises
    ``IllegalMove`` and stops the replay.
    """

    def __init__(self, game: GamePlay, moves: Sequence[int]) -> None:
        self.game = game
        self.moves = list(moves)
        self.index = 0
        self._stop = threading.Event()

    @property
    def done(self) -> bool:
        return self.index >= len(self.moves)

    def step(self) -> int:
        """Apply the next move and return its tile label."""
        if self.done:
            raise IndexError("replay already finished")
        tile = self.moves[self.index]
        self.game.apply(tile)
        self.index += 1
        return tile

    def stop(self) -> None:
        """Halt ``run`` after the move in progress."""
        self._stop.set()

    def run(
        self,
        interval: float,
        on_move: Callable[[int, int], None] | None = None,
        on_complete: Callable[[], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> bool:
        """Apply every remaining move, *interval* seconds apart.

        ``on_move(index, tile)`` runs after each move and ``on_complete()``
        once the last one has been applied. Returns False if stopped early.
        """
        logger.info("Replay start: %d moves", len(self.moves) - self.index)
        while not self.done:
            if self._stop.is_set():
                logger.info("Replay stopped at move %d", self.index)
                return False
            sleep(interval)
            tile = self.step()
            if on_move:
                on_move(self.index - 1, tile)
        logger.info("Replay complete")
        if on_complete:
            on_complete()
        return True
