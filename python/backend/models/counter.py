"""Bounded counter puzzle: step an integer up or down until it hits a goal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.engine.puzzle import Puzzle


class Step(StrEnum):
    INC = "inc"
    DEC = "dec"


@dataclass(frozen=True)
class CounterPuzzle(Puzzle[Step]):
    """An integer in ``[low, high]``; solved when it equals ``goal``.

    A step is only legal if it keeps the value inside the bounds, so ``DEC``
    at ``low`` and ``INC`` at ``high`` are never offered.  The goal may lie
    outside the bounds, in which case the puzzle is unsolvable.
    """

    value: int
    goal: int = 5
    low: int = 0
    high: int = 5

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Empty range [{self.low}, {self.high}].")
        if not self.low <= self.value <= self.high:
            raise ValueError(
                f"Value {self.value} outside [{self.low}, {self.high}]."
            )

    def is_goal(self) -> bool:
        return self.value == self.goal

    def next(self) -> list[tuple[Step, CounterPuzzle]]:
        result: list[tuple[Step, CounterPuzzle]] = []
        if self.value < self.high:
            result.append((Step.INC, self._with(self.value + 1)))
        if self.value > self.low:
            result.append((Step.DEC, self._with(self.value - 1)))
        return result

    def _with(self, value: int) -> CounterPuzzle:
        return CounterPuzzle(value, goal=self.goal, low=self.low, high=self.high)

    def __str__(self) -> str:
        return f"{self.value} (goal {self.goal}, range {self.low}..{self.high})"
