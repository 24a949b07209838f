#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py --tiles "1,2,3,4,5,6,0,7,8"     # solve and replay a 3×3
    python main.py -f board.json --no-replay        # solve a board from JSON
    python main.py -t "..." --max-depth 20 -v       # bound the search, log progress
"""

import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import SolveStatus  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import MalformedBoard  # noqa: E402
from backend.settings import DEFAULT_SETTINGS_FILE, load_settings  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2
EXIT_DEPTH_LIMIT = 3
EXIT_TIMED_OUT = 124
EXIT_CANCELLED = 130


# -- board input --------------------------------------------------------------


def parse_tiles(text: str) -> Board:
    """Parse ``"1,2,3 4 5 6 0 7 8"`` (commas and/or spaces) into a board."""
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    try:
        flat = [int(t) for t in tokens]
    except ValueError:
        raise MalformedBoard(f"Tiles must be integers, got {text!r}.") from None
    return Board.from_flat(flat)


def board_from_data(data: Any) -> Board:
    """Build a board from decoded JSON.

    Accepts a flat list, a list of rows, or ``{"size": N, "tiles": ...}``.
    """
    if isinstance(data, dict):
        if "tiles" not in data:
            raise MalformedBoard("Board object needs a 'tiles' key.")
        board = board_from_data(data["tiles"])
        if "size" in data and data["size"] != board.size:
            raise MalformedBoard(
                f"Declared size {data['size']} does not match {board.size}×{board.size} tiles."
            )
        return board
    if isinstance(data, list) and data and all(isinstance(row, list) for row in data):
        return Board.from_rows(data)
    if isinstance(data, list):
        return Board.from_flat(data)
    raise MalformedBoard(f"Unsupported board description: {type(data).__name__}.")


def read_board(path: Path) -> Board:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise MalformedBoard(f"Cannot read board from {path}: {e}") from e
    return board_from_data(data)


def _configure_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major tiles, blank as 0, e.g. '1,2,3,4,5,6,0,7,8'.",
    ),
    file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        help="JSON file holding the board.",
    ),
    config: Path = typer.Option(
        DEFAULT_SETTINGS_FILE, "-c", "--config",
        help="JSON settings file.",
    ),
    replay: bool = typer.Option(
        True, "--replay/--no-replay",
        help="Replay the solution on the board.",
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", min=0.0,
        help="Seconds between replayed moves.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.001,
        help=(
            "Give up the search after this many seconds. Boards are not "
            "checked for parity, so an unsolvable board larger than 3×3 "
            "can search for hours without one."
        ),
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0,
        help=(
            "Largest solution length to try. Defaults to the puzzle diameter "
            "(31 for 3×3, 80 for 4×4); a smaller value can stop before a "
            "solution is found. Use --timeout to bound 4×4 and larger boards."
        ),
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True,
        help="Log search progress (-vv for debug).",
    ),
) -> None:
    """Find an optimal solution for a sliding puzzle with IDA*."""
    _configure_logging(verbose)

    if (tiles is None) == (file is None):
        typer.secho("Give exactly one of --tiles or --file.", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_BAD_INPUT)

    try:
        board = parse_tiles(tiles) if tiles is not None else read_board(file)
    except MalformedBoard as e:
        typer.secho(f"Malformed board: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_BAD_INPUT)

    settings = load_settings(config).override(
        replay_interval=interval, timeout_sec=timeout, max_depth=max_depth,
    )
    logger.debug("Using %s", settings)

    from frontend.cli.rich.app import run

    result = run(board, settings, replay=replay)
    if result.status is SolveStatus.UNSOLVABLE:
        raise typer.Exit(EXIT_UNSOLVABLE)
    if result.status is SolveStatus.DEPTH_LIMIT:
        raise typer.Exit(EXIT_DEPTH_LIMIT)
    if result.status is SolveStatus.TIMED_OUT:
        raise typer.Exit(EXIT_TIMED_OUT)
    if result.status is SolveStatus.CANCELLED:
        raise typer.Exit(EXIT_CANCELLED)


if __name__ == "__main__":
    app()
