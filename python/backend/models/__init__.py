from backend.models.board import BLANK, Board, Direction
from backend.models.errors import IllegalMove, MalformedBoard, PuzzleError, SearchCancelled

__all__ = [
    "BLANK",
    "Board",
    "Direction",
    "IllegalMove",
    "MalformedBoard",
    "PuzzleError",
    "SearchCancelled",
]
