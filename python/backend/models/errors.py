"""Exceptions raised by the puzzle model and solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class MalformedBoard(PuzzleError, ValueError):
    """The tiles do not form a valid N×N permutation."""


class IllegalMove(PuzzleError):
    """The requested tile cannot slide into the blank."""

    def __init__(self, tile: int, reason: str = "not adjacent to the blank") -> None:
        super().__init__(f"Tile {tile} cannot move: {reason}.")
        self.tile = tile


class SearchCancelled(PuzzleError):
    """Raised inside a search when its context has been cancelled."""
