"""Generates puzzle start states by random walks from a known state."""

from __future__ import annotations

import logging
import random
from typing import TypeVar

from backend.engine.puzzle import Puzzle

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Puzzle)

MAX_ATTEMPTS = 20


class GameGenerator:
    """Creates solvable puzzles by walking away from a solved state."""

    @staticmethod
    def scramble(state: P, steps: int, rng: random.Random | None = None) -> P:
        """Return the state reached by *steps* random legal moves from *state*.

        Avoids stepping straight back to the previous state when another
        successor exists.  Stops early at a dead end.
        """
        rng = rng or random.Random()
        prev: P | None = None

        for _ in range(steps):
            successors = [s for _, s in state.next()]
            if not successors:
                break
            if len(successors) > 1 and prev in successors:
                successors.remove(prev)
            prev, state = state, rng.choice(successors)
        return state

    @staticmethod
    def generate(solved: P, steps: int, rng: random.Random | None = None) -> P:
        """Return a scrambled state that is not already a goal, if one can be found."""
        rng = rng or random.Random()
        state = solved
        for attempt in range(MAX_ATTEMPTS):
            state = GameGenerator.scramble(solved, steps, rng)
            if not state.is_goal():
                return state
            logger.debug("scramble attempt %d landed on a goal; retrying", attempt)
        return state
