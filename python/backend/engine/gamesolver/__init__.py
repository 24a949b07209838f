from backend.engine.gamesolver.context import ProgressEvent, SearchContext
from backend.engine.gamesolver.heuristic import manhattan
from backend.engine.gamesolver.solver import (
    IdaStarSolver,
    SolveResult,
    SolveStatus,
    solve_board,
)
from backend.engine.gamesolver.worker import SolutionHandle, start_search

__all__ = [
    "IdaStarSolver",
    "ProgressEvent",
    "SearchContext",
    "SolutionHandle",
    "SolveResult",
    "SolveStatus",
    "manhattan",
    "solve_board",
    "start_search",
]
