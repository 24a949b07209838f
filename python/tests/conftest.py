"""Shared fixtures for the solver test suite.

Boards are JSON fixtures under ``<project_root>/fixtures/``. Each entry has
an ``id``, a ``size`` and ``tiles`` as a list of rows; solvable entries also
carry their ``optimal`` move count.
"""

from __future__ import annotations

import json
import random
from collections.abc import Callable
from pathlib import Path

import pytest

from backend.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    return Board.from_rows(data["tiles"])


@pytest.fixture
def random_walk() -> Callable[[int, int, int], Board]:
    """Return ``walk(size, steps, seed)``: a seeded scramble of the goal.

    The walk never undoes its previous move, so it stays within ``steps``
    moves of the goal.
    """

    def walk(size: int, steps: int, seed: int) -> Board:
        rng = random.Random(seed)
        board = Board.goal(size)
        previous: Board | None = None
        for _ in range(steps):
            options = [b for _, b in board.neighbors() if b != previous]
            previous, board = board, rng.choice(options)
        return board

    return walk
