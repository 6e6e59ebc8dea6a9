#!/usr/bin/env python3
"""Breadth-first puzzle solver.

Usage::

    python main.py solve --tiles 1,2,3,4,5,6,7,0,8     # sliding board
    python main.py solve -s 3 --scramble 30 --seed 7   # random 3×3 board
    python main.py solve --counter 0 --goal 5          # bounded counter
    python main.py check --tiles 1,2,3,4,5,6,7,0,8 --moves left
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.engine.puzzle import Puzzle  # noqa: E402
from backend.engine.verifier import check as check_moves  # noqa: E402
from backend.models import Board, CounterPuzzle, Direction  # noqa: E402

MIN_SIZE = 2
MAX_SIZE = 4
DEFAULT_SIZE = 3
DEFAULT_SCRAMBLE = 20

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _parse_tiles(raw: str) -> Board:
    try:
        flat = [int(v) for v in raw.split(",")]
    except ValueError:
        raise typer.BadParameter(f"Tiles must be integers: {raw!r}")
    size = int(round(len(flat) ** 0.5))
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise typer.BadParameter(
            f"Board size must be {MIN_SIZE}-{MAX_SIZE}, got {len(flat)} tiles."
        )
    try:
        return Board.from_flat(size, flat)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _parse_moves(raw: str) -> list[Direction]:
    try:
        return [Direction(m.strip().lower()) for m in raw.split(",") if m.strip()]
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _build_start(
    tiles: Optional[str],
    size: int,
    scramble: int,
    seed: Optional[int],
    counter: Optional[int],
    goal: int,
    low: int,
    high: int,
) -> Puzzle:
    if counter is not None:
        try:
            return CounterPuzzle(counter, goal=goal, low=low, high=high)
        except ValueError as e:
            raise typer.BadParameter(str(e))
    if tiles is not None:
        return _parse_tiles(tiles)
    return GameGenerator.generate(Board.solved(size), scramble, random.Random(seed))


# -- CLI entry points ---------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def solve(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Comma-separated row-major tiles, 0 for the blank.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help="Board size for a scrambled board (2-4).",
    ),
    scramble: int = typer.Option(
        DEFAULT_SCRAMBLE, "--scramble",
        min=0,
        help="Random moves applied to the solved board.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Scramble seed."),
    counter: Optional[int] = typer.Option(
        None, "--counter",
        help="Solve a bounded counter puzzle starting at this value.",
    ),
    goal: int = typer.Option(5, "--goal", help="Counter goal value."),
    low: int = typer.Option(0, "--low", help="Counter lower bound."),
    high: int = typer.Option(5, "--high", help="Counter upper bound."),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to show the result.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Find a shortest solution and show it."""
    _configure_logging(verbose)
    start = _build_start(tiles, size, scramble, seed, counter, goal, low, high)

    if isinstance(start, Board) and not start.is_solvable():
        logger.debug("board fails the parity check; skipping search")
        result = None
    else:
        result = Solver.solve(start)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(start, result)

    if result is None:
        raise typer.Exit(code=1)


@app.command()
def check(
    tiles: str = typer.Option(
        ..., "-t", "--tiles",
        help="Comma-separated row-major tiles, 0 for the blank.",
    ),
    moves: str = typer.Option(
        "", "-m", "--moves",
        help="Comma-separated tile moves: up, down, left, right.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to show the result.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Verify that a move sequence solves a board."""
    _configure_logging(verbose)
    start = _parse_tiles(tiles)
    move_list = _parse_moves(moves)

    reached = check_moves(start, move_list)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run_check(start, move_list, reached)

    if reached is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
