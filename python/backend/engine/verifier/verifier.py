"""Replays a move sequence and confirms it solves a puzzle."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from backend.engine.puzzle import Puzzle

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Puzzle)


def step(state: P, move: object) -> P | None:
    """Return the successor of *state* reached by *move*, or ``None`` if illegal."""
    for m, successor in state.next():
        if m == move:
            return successor
    return None


def check(start: P, moves: Iterable[object]) -> P | None:
    """Return the goal state reached from *start* by *moves*.

    Returns ``None`` if some move has no matching successor at its point in
    the replay, or if the final state is not a goal.
    """
    state = start
    for i, move in enumerate(moves):
        successor = step(state, move)
        if successor is None:
            logger.debug("move %d (%r) is illegal from %r", i, move, state)
            return None
        logger.debug("move %d (%r): %r -> %r", i, move, state, successor)
        state = successor

    return state if state.is_goal() else None
