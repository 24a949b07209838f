"""Sliding puzzle solver: IDA* with the Manhattan distance heuristic."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gamesolver.context import SearchContext
from backend.engine.gamesolver.heuristic import manhattan
from backend.models.board import Board
from backend.models.errors import SearchCancelled

logger = logging.getLogger(__name__)

# Longest optimal solution (God's number) per board side.
KNOWN_DIAMETERS: dict[int, int] = {2: 6, 3: 31, 4: 80}


class SolveStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    DEPTH_LIMIT = "depth_limit"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"


@dataclass
class SolveResult:
    """Outcome of one ``solve`` call.

    ``moves`` holds tile labels in the order they must slide; it is empty
    unless ``status`` is ``SOLVED``.
    """

    status: SolveStatus
    moves: list[int] = field(default_factory=list)
    expansions: int = 0
    threshold: int = 0
    iterations: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def move_count(self) -> int:
        return len(self.moves)


@dataclass
class _Frame:
    board: Board
    g: int
    tile: int | None
    children: Iterator[tuple[int, Board]]
    minimum: float = math.inf


def default_max_depth(size: int) -> int | None:
    return KNOWN_DIAMETERS.get(size)


class IdaStarSolver:
    """Iterative-deepening A* over sliding puzzle boards.

    Each pass is a depth-first search bounded by ``threshold`` on the
    ``f = g + h`` cost. A neighbor whose board is already on the active path
    is skipped; there is no global visited set. The pass runs on an explicit
    stack, so deep thresholds never hit the interpreter recursion limit.

    ``trial_count`` accumulates the expansions of every solve made by this
    instance.
    """

    def __init__(
        self,
        heuristic: Callable[[Board], int] = manhattan,
        max_depth: int | None = None,
    ) -> None:
        self.heuristic = heuristic
        self.max_depth = max_depth
        self.trial_count = 0

    def solve(self, board: Board, context: SearchContext | None = None) -> SolveResult:
        """Return the optimal move sequence for *board*.

        An already-solved board gives an empty solution. The result is
        ``UNSOLVABLE`` when no node is left to expand or when the threshold
        passes the puzzle diameter. Running past a ``max_depth`` smaller
        than the diameter gives ``DEPTH_LIMIT``, since a solution may still
        exist. A cancelled context gives ``CANCELLED``, an expired timeout
        ``TIMED_OUT``.
        """
        ctx = context or SearchContext()
        ctx.start()
        already = ctx.expansions
        diameter = default_max_depth(board.size)
        max_depth = self.max_depth if self.max_depth is not None else diameter
        threshold = self.heuristic(board)
        iterations = 0
        logger.info(
            "Search start: %d×%d board, h=%d, max depth %s",
            board.size, board.size, threshold, max_depth,
        )

        status = SolveStatus.UNSOLVABLE
        moves: list[int] = []
        try:
            if board.is_solved():
                status = SolveStatus.SOLVED
            else:
                while max_depth is None or threshold <= max_depth:
                    iterations += 1
                    ctx.threshold = threshold
                    found, overshoot = self._bounded_search(board, threshold, ctx)
                    if found is not None:
                        status, moves = SolveStatus.SOLVED, found
                        break
                    if overshoot == math.inf:
                        logger.info("No node left to expand at threshold %d", threshold)
                        break
                    threshold = int(overshoot)
                    logger.debug(
                        "Threshold raised to %d after %d expansions",
                        threshold, ctx.expansions,
                    )
                else:
                    logger.info("Threshold %d exceeds depth bound %s", threshold, max_depth)
                    if diameter is None or max_depth < diameter:
                        status = SolveStatus.DEPTH_LIMIT
        except SearchCancelled as e:
            logger.info("Search %s", e)
            if ctx.timed_out() and not ctx.cancel_flag.is_set():
                status = SolveStatus.TIMED_OUT
            else:
                status = SolveStatus.CANCELLED

        ctx.flush()
        self.trial_count += ctx.expansions - already
        result = SolveResult(
            status=status,
            moves=moves,
            expansions=ctx.expansions,
            threshold=threshold,
            iterations=iterations,
            elapsed=ctx.elapsed_time(),
        )
        logger.info(
            "Search %s: %d moves, %d expansions, %.2fs",
            result.status, result.move_count, result.expansions, result.elapsed,
        )
        return result

    def _bounded_search(
        self, start: Board, threshold: int, ctx: SearchContext
    ) -> tuple[list[int] | None, float]:
        """One cost-bounded depth-first pass.

        Returns ``(moves, inf)`` when the goal is reached, else
        ``(None, overshoot)`` with the smallest ``f`` that exceeded
        *threshold*, or infinity when nothing was pruned.
        """
        stack = [_Frame(start, 0, None, iter(start.neighbors()))]
        on_path = {start}

        while stack:
            frame = stack[-1]
            step = next(frame.children, None)
            if step is None:
                stack.pop()
                on_path.discard(frame.board)
                if not stack:
                    return None, frame.minimum
                parent = stack[-1]
                parent.minimum = min(parent.minimum, frame.minimum)
                continue

            tile, child = step
            if child in on_path:
                continue
            ctx.record_expansion()

            g = frame.g + 1
            f = g + self.heuristic(child)
            if f > threshold:
                frame.minimum = min(frame.minimum, f)
                continue
            if child.is_solved():
                return [fr.tile for fr in stack[1:]] + [tile], math.inf

            stack.append(_Frame(child, g, tile, iter(child.neighbors())))
            on_path.add(child)

        return None, math.inf

    # -- conveniences ---------------------------------------------------------

    def hint(self, board: Board) -> int | None:
        """Return the first tile of an optimal solution, or ``None``."""
        result = self.solve(board)
        return result.moves[0] if result.moves else None


def solve_board(
    board: Board,
    context: SearchContext | None = None,
    max_depth: int | None = None,
) -> SolveResult:
    """Solve *board* with a fresh ``IdaStarSolver``."""
    return IdaStarSolver(max_depth=max_depth).solve(board, context)
