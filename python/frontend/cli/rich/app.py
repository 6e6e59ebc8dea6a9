"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.puzzle import Puzzle
from backend.models.board import Board

console = Console()


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> Table:
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
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render(state: Puzzle) -> RenderableType:
    if isinstance(state, Board):
        return _render_board(state)
    return Text(str(state), style="bold white")


def _moves_table(moves: Sequence) -> Table:
    table = Table(box=rich.box.SIMPLE, border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Move", style="bold cyan")
    for i, move in enumerate(moves, 1):
        table.add_row(str(i), str(move))
    return table


# -- public entry points ------------------------------------------------------


def run(start: Puzzle, result: tuple[Sequence, Puzzle] | None) -> None:
    """Show *start*, the move list, and the goal state reached."""
    console.print()
    console.print(Panel(
        Align.center(_render(start)),
        title="[bold]Start[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    ))

    if result is None:
        console.print("[red]No solution: no goal state is reachable.[/red]")
        return

    moves, goal = result
    if not moves:
        console.print("[green]Already solved![/green]")
        return

    body = Group(Align.center(_moves_table(moves)), Align.center(_render(goal)))
    console.print(Panel(
        body,
        title=f"[bold green]Solved in {len(moves)} moves[/bold green]",
        border_style="green",
        padding=(1, 2),
    ))


def run_check(start: Puzzle, moves: Sequence, reached: Puzzle | None) -> None:
    """Report the outcome of verifying *moves* against *start*."""
    game = GamePlay.replay(start, moves)

    status = Text()
    if reached is not None:
        status.append(f"Valid solution ({len(moves)} moves).", style="bold green")
    elif game.moves < len(moves):
        status.append(
            f"Illegal move {game.moves + 1} ({moves[game.moves]}).",
            style="bold red",
        )
    else:
        status.append("Moves are legal but do not reach a goal.", style="bold yellow")

    console.print()
    console.print(Panel(
        Group(Align.center(_render(game.state)), Text(""), Align.center(status)),
        title=f"[bold]Check: {game.moves}/{len(moves)} moves applied[/bold]",
        border_style="green" if reached is not None else "red",
        padding=(1, 2),
    ))
