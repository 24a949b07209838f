"""Background solver worker.

Runs a full IDA* search on a daemon thread so the caller never blocks.
Progress arrives through the callback; the result through a
``concurrent.futures.Future`` wrapped in a ``SolutionHandle``.

Example::

    handle = start_search(board, on_progress=lambda e: print(e.expansions))
    result = handle.result()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future

from backend.engine.gamesolver.context import ProgressCallback, SearchContext
from backend.engine.gamesolver.solver import IdaStarSolver, SolveResult
from backend.models.board import Board
from backend.settings import SolverSettings

logger = logging.getLogger(__name__)


class SolutionHandle:
    """Handle on a search running in the background."""

    def __init__(self, context: SearchContext, future: Future[SolveResult]) -> None:
        self._context = context
        self._future = future

    @property
    def expansions(self) -> int:
        return self._context.expansions

    def cancel(self) -> None:
        """Ask the search to stop at its next expansion."""
        logger.info("Cancellation requested")
        self._context.cancel()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> SolveResult:
        """Block until the search ends.

        Raises ``TimeoutError`` if *timeout* elapses first and re-raises any
        exception the search itself raised.
        """
        return self._future.result(timeout)

    def add_done_callback(self, fn: Callable[[SolveResult], None]) -> None:
        """Call *fn* with the result once the search has finished."""
        self._future.add_done_callback(lambda f: fn(f.result()))


def start_search(
    board: Board,
    on_progress: ProgressCallback | None = None,
    settings: SolverSettings | None = None,
    solver: IdaStarSolver | None = None,
) -> SolutionHandle:
    """Start solving *board* on a background thread and return at once."""
    settings = settings or SolverSettings()
    solver = solver or IdaStarSolver(max_depth=settings.max_depth)
    context = SearchContext(
        progress_callback=on_progress,
        progress_interval=settings.progress_interval,
        timeout_sec=settings.timeout_sec,
    )
    future: Future[SolveResult] = Future()
    future.set_running_or_notify_cancel()

    def _run() -> None:
        try:
            result = solver.solve(board, context)
        except BaseException as e:
            logger.exception("Solver worker failed")
            future.set_exception(e)
        else:
            future.set_result(result)

    thread = threading.Thread(target=_run, name="ida-solver", daemon=True)
    thread.start()
    logger.debug("Solver worker started")
    return SolutionHandle(context, future)
