"""Solver test suite.

Every solution returned by the solver is replayed through the verifier and
compared against an exhaustive depth-limited search to confirm it is the
shortest.  Tests are killed after the ``pytest-timeout`` default configured
in ``pyproject.toml``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import product

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Predecessor, Solver, solve
from backend.engine.puzzle import Puzzle
from backend.engine.verifier import check, step
from backend.models import Board, CounterPuzzle, Direction, Step


# -- test puzzles -------------------------------------------------------------


_GRAPH: dict[str, list[tuple[str, str]]] = {
    # a -x-> b, a -y-> c, both b and c reach d; d is the goal.
    "a": [("x", "b"), ("y", "c")],
    "b": [("p", "d")],
    "c": [("q", "d")],
    "d": [],
    # e has two edges to the same successor.
    "e": [("first", "d"), ("second", "d")],
    # f only reaches a dead end.
    "f": [("z", "g")],
    "g": [],
}


@dataclass(frozen=True)
class Node(Puzzle[str]):
    name: str

    def is_goal(self) -> bool:
        return self.name == "d"

    def next(self) -> list[tuple[str, Node]]:
        return [(m, Node(n)) for m, n in _GRAPH[self.name]]


@dataclass(frozen=True)
class Line(Puzzle[int]):
    """Unbounded integer line; infinite state space."""

    pos: int

    def is_goal(self) -> bool:
        return self.pos == 3

    def next(self) -> list[tuple[int, Line]]:
        return [(+1, Line(self.pos + 1)), (-1, Line(self.pos - 1))]


# -- helpers ------------------------------------------------------------------


def _shortest_by_enumeration(start: Puzzle, limit: int) -> int | None:
    """Length of the shortest move sequence reaching a goal, by brute force."""
    if start.is_goal():
        return 0
    frontier = [start]
    for depth in range(1, limit + 1):
        frontier = [s for p in frontier for _, s in p.next()]
        if any(s.is_goal() for s in frontier):
            return depth
    return None


def _assert_solve(start: Puzzle) -> None:
    """Solve *start* and verify the moves are legal, reach the goal, and are minimal."""
    result = Solver.solve(start)
    assert result is not None, f"Solvable state returned None ({start!r})"
    moves, goal = result

    assert goal.is_goal()
    assert check(start, moves) == goal
    assert _shortest_by_enumeration(start, len(moves)) == len(moves)


def _scrambled_boards(count: int) -> list[Board]:
    rng = random.Random(42)
    return [
        GameGenerator.generate(Board.solved(3), steps=rng.randint(1, 10), rng=rng)
        for _ in range(count)
    ]


# -- counter scenario ---------------------------------------------------------


def test_counter_from_zero_takes_five_increments() -> None:
    assert solve(CounterPuzzle(0)) == ([Step.INC] * 5, CounterPuzzle(5))


def test_counter_from_middle_goes_up() -> None:
    moves, goal = solve(CounterPuzzle(3))
    assert moves == [Step.INC, Step.INC]
    assert goal.value == 5


def test_counter_goal_below_start() -> None:
    moves, goal = solve(CounterPuzzle(4, goal=1))
    assert moves == [Step.DEC] * 3
    assert goal == CounterPuzzle(1, goal=1)


def test_counter_unreachable_goal_returns_none() -> None:
    assert solve(CounterPuzzle(0, goal=99)) is None


# -- edge cases ---------------------------------------------------------------


def test_start_already_goal_returns_empty_moves() -> None:
    start = CounterPuzzle(5)
    moves, goal = Solver.solve(start)
    assert moves == []
    assert goal is start


def test_solved_board_returns_empty_moves() -> None:
    board = Board.solved(3)
    assert Solver.solve(board) == ([], board)


def test_dead_end_returns_none() -> None:
    assert Solver.solve(Node("f")) is None


def test_infinite_space_with_reachable_goal() -> None:
    assert Solver.solve(Line(0)) == ([1, 1, 1], Line(3))
    assert Solver.solve(Line(5)) == ([-1, -1], Line(3))


def test_unsolvable_2x2_board_returns_none() -> None:
    board = Board.from_flat(2, [2, 1, 3, 0])
    assert not board.is_solvable()
    assert Solver.solve(board) is None


# -- tie-breaking -------------------------------------------------------------


def test_first_enumerated_successor_wins() -> None:
    assert Solver.solve(Node("a")) == (["x", "p"], Node("d"))


def test_duplicate_edge_is_not_overwritten() -> None:
    assert Solver.solve(Node("e")) == (["first"], Node("d"))


# -- sliding boards -----------------------------------------------------------


def test_one_move_board() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert Solver.solve(board) == ([Direction.LEFT], Board.solved(3))


def test_two_move_board() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    moves, _ = Solver.solve(board)
    assert moves == [Direction.LEFT, Direction.LEFT]


@pytest.mark.parametrize(
    "board", _scrambled_boards(12), ids=lambda b: ",".join(map(str, b.tiles))
)
def test_scrambled_3x3(board: Board) -> None:
    _assert_solve(board)


@pytest.mark.parametrize(
    "board",
    [Board.from_flat(2, [0, 3, 2, 1]), Board.from_flat(2, [3, 1, 0, 2])],
    ids=["2x2-a", "2x2-b"],
)
def test_solvable_2x2(board: Board) -> None:
    assert board.is_solvable()
    _assert_solve(board)


def test_solution_replays_move_by_move() -> None:
    board = _scrambled_boards(1)[0]
    moves, goal = Solver.solve(board)
    state = board
    for move in moves:
        state = step(state, move)
        assert state is not None
    assert state == goal


# -- hint ---------------------------------------------------------------------


def test_hint_is_first_move_of_solution() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert Solver.hint(board) == Direction.LEFT


def test_hint_none_when_solved_or_unsolvable() -> None:
    assert Solver.hint(Board.solved(3)) is None
    assert Solver.hint(CounterPuzzle(0, goal=99)) is None


# -- backtracking -------------------------------------------------------------


def test_backtrack_consumes_path_entries() -> None:
    a, b, c = Node("a"), Node("b"), Node("d")
    discovered = {
        a: None,
        b: Predecessor(a, "x"),
        c: Predecessor(b, "p"),
        Node("c"): Predecessor(a, "y"),
    }
    assert Solver._backtrack(discovered, c) == ["x", "p"]
    assert discovered == {Node("c"): Predecessor(a, "y")}


def test_backtrack_missing_goal_returns_none() -> None:
    assert Solver._backtrack({Node("a"): None}, Node("d")) is None


def test_backtrack_broken_chain_returns_none() -> None:
    discovered = {Node("d"): Predecessor(Node("b"), "p")}
    assert Solver._backtrack(discovered, Node("d")) is None


# -- minimality against brute force -------------------------------------------


@pytest.mark.parametrize("start", range(0, 6), ids=lambda v: f"counter-{v}")
@pytest.mark.parametrize("goal", [0, 2, 5])
def test_counter_minimal(start: int, goal: int) -> None:
    moves, _ = solve(CounterPuzzle(start, goal=goal))
    assert len(moves) == abs(goal - start)
    # No shorter sequence over the full move alphabet reaches the goal.
    for length in range(len(moves)):
        for seq in product(list(Step), repeat=length):
            assert check(CounterPuzzle(start, goal=goal), seq) is None
