"""Breadth-first puzzle solver with visited-state hashing."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Generic, TypeVar

from backend.engine.puzzle import M, Puzzle

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Puzzle)


@dataclass(frozen=True)
class Predecessor(Generic[M]):
    """The edge that first reached a state: where it came from, and how."""

    state: Puzzle[M]
    move: M


# Start state maps to None; every other discovered state to its Predecessor.
Discovery = dict[Puzzle, "Predecessor | None"]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(start: P) -> tuple[list, P] | None:
        """Return ``(moves, goal)`` for a shortest solution of *start*.

        Returns ``None`` if no goal state is reachable.  Ties between
        equally short solutions are broken by the order of ``next()``.
        If the reachable state space is infinite and holds no goal, this
        does not return.
        """
        discovered: Discovery = {start: None}
        frontier: deque[P] = deque([start])

        while frontier:
            state = frontier.popleft()

            if state.is_goal():
                logger.debug(
                    "goal found after discovering %d states", len(discovered)
                )
                moves = Solver._backtrack(discovered, state)
                if moves is None:
                    return None
                return moves, state

            for move, successor in state.next():
                if successor in discovered:
                    continue
                discovered[successor] = Predecessor(state, move)
                frontier.append(successor)

        logger.debug("no solution; %d states explored", len(discovered))
        return None

    @staticmethod
    def hint(start: Puzzle[M]) -> M | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        if start.is_goal():
            return None

        result = Solver.solve(start)
        if result is None:
            return None

        moves, _ = result
        return moves[0]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _backtrack(discovered: Discovery, goal: Puzzle[M]) -> list[M] | None:
        """Walk predecessor edges from *goal* back to the start.

        Empties *discovered* along the path.  Returns the moves in
        start-to-goal order.
        """
        moves: list[M] = []
        state = goal
        while True:
            try:
                entry = discovered.pop(state)
            except KeyError:
                logger.error("state %r missing from discovery map", state)
                return None
            if entry is None:
                break
            moves.append(entry.move)
            state = entry.state

        moves.reverse()
        return moves
