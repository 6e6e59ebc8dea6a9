"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to show a solution step by step.
"""

from __future__ import annotations

from collections.abc import Sequence

from backend.engine.gameplay import GamePlay
from backend.engine.puzzle import Puzzle
from backend.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _render(state: Puzzle) -> str:
    if isinstance(state, Board):
        return _render_board(state)
    return f"  {state}"


# -- public entry points ------------------------------------------------------


def run(start: Puzzle, result: tuple[Sequence, Puzzle] | None) -> None:
    """Print *start* and, if solved, every state along the solution."""
    print(f"\n  {_C}=== Start ==={_R}")
    print(_render(start))

    if result is None:
        print(f"\n  {_RED}No solution: no goal state is reachable.{_R}\n")
        return

    moves, _ = result
    if not moves:
        print(f"\n  {_G}Already solved!{_R}\n")
        return

    game = GamePlay(start)
    for i, move in enumerate(moves, 1):
        game.move(move)
        print(f"\n  {_DIM}move {i}/{len(moves)}{_R} {_Y}{move}{_R}")
        print(_render(game.state))

    print(f"\n  {_G}Solved in {len(moves)} moves!{_R}\n")


def run_check(start: Puzzle, moves: Sequence, reached: Puzzle | None) -> None:
    """Report the outcome of verifying *moves* against *start*."""
    print(_render(start))
    if reached is None:
        game = GamePlay.replay(start, moves)
        if game.moves < len(moves):
            print(
                f"\n  {_RED}Illegal move {game.moves + 1} "
                f"({moves[game.moves]}).{_R}\n"
            )
        else:
            print(f"\n  {_RED}Moves are legal but do not reach a goal.{_R}")
            print(_render(game.state))
            print()
        return

    print(f"\n  {_G}Valid solution ({len(moves)} moves).{_R}")
    print(_render(reached))
    print()
