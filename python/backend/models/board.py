"""Board model for the sliding puzzle."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import IllegalMove, MalformedBoard

BLANK = 0


class Direction(StrEnum):
    """Direction a *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """An immutable sliding puzzle configuration.

    Tiles are stored as a flat row-major tuple. ``0`` represents the blank.
    Every move produces a new board, so a board can be shared freely
    between search branches.
    """

    size: int
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        # Lists and other sequences are accepted; the stored value is always a tuple.
        object.__setattr__(self, "tiles", _as_ints(self.tiles))
        if self.size < 2:
            raise MalformedBoard(f"Board side must be at least 2, got {self.size}.")
        count = self.size * self.size
        if len(self.tiles) != count:
            raise MalformedBoard(
                f"Expected {count} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.tiles)}."
            )
        if sorted(self.tiles) != list(range(count)):
            counts = Counter(self.tiles)
            dupes = sorted(v for v, c in counts.items() if c > 1)
            missing = sorted(set(range(count)) - set(self.tiles))
            raise MalformedBoard(
                f"Tiles must be a permutation of 0..{count - 1} "
                f"(duplicates: {dupes or 'none'}, missing: {missing or 'none'})."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[int], size: int | None = None) -> Board:
        """Create a board from a flat row-major tile list.

        The side length is inferred when *size* is omitted. Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = _as_ints(flat)
        if size is None:
            size = math.isqrt(len(tiles))
            if size * size != len(tiles):
                raise MalformedBoard(
                    f"{len(tiles)} tiles do not form a square board."
                )
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise MalformedBoard("Every row must have as many tiles as there are rows.")
        return cls(size=size, tiles=_as_ints(v for row in rows for v in row))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=tuple(range(1, size * size)) + (BLANK,))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(BLANK)

    def index_of(self, tile: int) -> int:
        try:
            return self.tiles.index(tile)
        except ValueError:
            raise IllegalMove(tile, "no such tile on the board") from None

    def position(self, index: int) -> tuple[int, int]:
        """Return the ``(column, row)`` of a flat index."""
        return index % self.size, index // self.size

    @property
    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        return self.tiles[last] == BLANK and all(
            self.tiles[i] == i + 1 for i in range(last)
        )

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == BLANK:
            return index == len(self.tiles) - 1
        return val - 1 == index

    # -- moves ----------------------------------------------------------------

    def neighbors(self) -> list[tuple[int, Board]]:
        """Return every ``(tile, board)`` reachable by a single slide.

        Candidates are tried in the order +1, -1, +N, -N from the blank.
        Horizontal candidates must stay on the blank's row.
        """
        n = self.size
        blank = self.blank_index
        out: list[tuple[int, Board]] = []
        for offset in (1, -1, n, -n):
            target = blank + offset
            if not 0 <= target < len(self.tiles):
                continue
            if offset in (1, -1) and target // n != blank // n:
                continue
            out.append((self.tiles[target], self._swap(blank, target)))
        return out

    def is_movable(self, tile: int) -> bool:
        """True if *tile* is orthogonally adjacent to the blank."""
        if tile == BLANK or tile not in self.tiles:
            return False
        bc, br = self.position(self.blank_index)
        tc, tr = self.position(self.tiles.index(tile))
        return abs(bc - tc) + abs(br - tr) == 1

    def apply_move(self, tile: int) -> Board:
        """Slide *tile* into the blank and return the resulting board.

        Raises ``IllegalMove`` if the tile is not next to the blank.
        """
        index = self.index_of(tile)
        if not self.is_movable(tile):
            raise IllegalMove(tile)
        return self._swap(self.blank_index, index)

    def slide_direction(self, tile: int) -> Direction:
        """Direction *tile* would travel when moved into the blank."""
        if not self.is_movable(tile):
            raise IllegalMove(tile)
        bc, br = self.position(self.blank_index)
        tc, tr = self.position(self.tiles.index(tile))
        if tr > br:
            return Direction.UP
        if tr < br:
            return Direction.DOWN
        if tc > bc:
            return Direction.LEFT
        return Direction.RIGHT

    # -- helpers --------------------------------------------------------------

    def _swap(self, blank: int, target: int) -> Board:
        tiles = list(self.tiles)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        # A swap of a valid board is valid; skip __post_init__.
        board = object.__new__(Board)
        object.__setattr__(board, "size", self.size)
        object.__setattr__(board, "tiles", tuple(tiles))
        return board

    def __str__(self) -> str:
        width = len(str(len(self.tiles) - 1))
        return "\n".join(
            " ".join("." * width if v == BLANK else f"{v:>{width}}" for v in row)
            for row in self.rows
        )


def _as_ints(values: Iterable[object]) -> tuple[int, ...]:
    out: list[int] = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise MalformedBoard(f"Tile values must be integers, got {v!r}.")
        out.append(v)
    return tuple(out)
