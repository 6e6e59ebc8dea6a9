"""Capability contract every puzzle state must satisfy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, Self, TypeVar

M = TypeVar("M")


class Puzzle(ABC, Generic[M]):
    """One configuration of a puzzle.

    Subclasses must be hashable and compare by value: the solver uses
    states as dictionary keys and never copies them, so concrete states
    are expected to be immutable (e.g. ``@dataclass(frozen=True)``).
    """

    @abstractmethod
    def is_goal(self) -> bool:
        """Return True if this state is solved."""

    @abstractmethod
    def next(self) -> Sequence[tuple[M, Self]]:
        """Return every legal ``(move, successor)`` pair reachable in one move.

        The order of the result is the tie-break order used by the solver:
        when two successors are the same state, the first one wins.
        """
