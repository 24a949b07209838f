"""Rich terminal frontend: solves a board and replays the solution.

Uses the ``rich`` library for styled output. The search runs on the
background worker while a spinner shows the trial count.
"""

from __future__ import annotations

import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay, SolutionReplay
from backend.engine.gamesolver import ProgressEvent, SolveResult, SolveStatus, start_search
from backend.models.board import BLANK, Board, Direction
from backend.settings import SolverSettings

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold]{title}  {board.size}×{board.size}[/bold]",
        border_style=style,
        padding=(1, 2),
    )


# -- search -------------------------------------------------------------------


def _search(board: Board, settings: SolverSettings) -> SolveResult:
    with console.status("[cyan]solving…[/cyan]") as status:

        def _on_progress(event: ProgressEvent) -> None:
            status.update(
                f"[cyan]trial {event.expansions:,}[/cyan]  "
                f"[dim](threshold {event.threshold})[/dim]"
            )

        handle = start_search(board, on_progress=_on_progress, settings=settings)
        try:
            return handle.result()
        except KeyboardInterrupt:
            handle.cancel()
            return handle.result()


def _summary(result: SolveResult) -> Text:
    text = Text()
    if result.status is SolveStatus.SOLVED:
        noun = "move" if result.move_count == 1 else "moves"
        text.append(f"  Solved in {result.move_count} {noun}", style="bold green")
    elif result.status is SolveStatus.UNSOLVABLE:
        text.append("  Board is unsolvable", style="bold red")
    elif result.status is SolveStatus.DEPTH_LIMIT:
        text.append(
            f"  No solution within {result.threshold - 1} moves (depth limit)",
            style="bold yellow",
        )
    elif result.status is SolveStatus.TIMED_OUT:
        text.append("  Search timed out", style="bold yellow")
    else:
        text.append("  Search cancelled", style="bold yellow")
    text.append(
        f"  (trial {result.expansions:,}, {result.iterations} passes, "
        f"{result.elapsed:.2f}s)",
        style="dim",
    )
    return text


# -- replay -------------------------------------------------------------------


def _replay(board: Board, moves: list[int], interval: float) -> None:
    directions: list[Direction] = []
    walk = board
    for tile in moves:
        directions.append(walk.slide_direction(tile))
        walk = walk.apply_move(tile)

    game = GamePlay(board)
    replay = SolutionReplay(game, moves)

    def _on_move(index: int, tile: int) -> None:
        console.clear()
        progress = Text()
        progress.append(f"  Solving… move {index + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"(tile {tile} {directions[index].value})", style="dim")
        console.print()
        console.print(Align.center(_board_panel(game.board, "Auto-Solve", "cyan")))
        console.print(Align.center(progress))
        sys.stdout.flush()

    def _on_complete() -> None:
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("SOLVED!", style="bold green")
        congrats.append(f"  {game.state.moves} moves replayed  ", style="green")
        congrats.append("★\n", style="bold yellow")
        console.print(Align.center(congrats))

    try:
        replay.run(interval, on_move=_on_move, on_complete=_on_complete)
    except KeyboardInterrupt:
        replay.stop()


# -- public entry point -------------------------------------------------------


def run(board: Board, settings: SolverSettings, replay: bool = True) -> SolveResult:
    """Solve *board*, print the outcome and optionally replay it."""
    console.print()
    console.print(Align.center(_board_panel(board, "Sliding Puzzle")))

    result = _search(board, settings)

    parts: list[Text] = [_summary(result)]
    if result.solved and result.moves:
        moves = Text("  Moves: ", style="dim")
        moves.append(" ".join(str(m) for m in result.moves), style="bold yellow")
        parts.append(moves)
    console.print(Group(*parts))

    if replay and result.solved and result.moves:
        _replay(board, result.moves, settings.replay_interval)

    return result
