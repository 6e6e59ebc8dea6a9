"""Core gameplay logic — applies moves to a puzzle and checks the win condition."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic

from backend.engine.puzzle import M, Puzzle
from backend.engine.verifier import step


class GamePlay(Generic[M]):
    """Orchestrates a single session on any puzzle."""

    def __init__(self, start: Puzzle[M]) -> None:
        self.start = start
        self.state = start
        self.history: list[M] = []

    @classmethod
    def replay(cls, start: Puzzle[M], moves: Iterable[M]) -> GamePlay[M]:
        """Create a session and apply *moves*, stopping at the first illegal one."""
        game = cls(start)
        for move in moves:
            if not game.move(move):
                break
        return game

    # -- movement -------------------------------------------------------------

    def move(self, move: M) -> bool:
        """Apply *move* if it is legal.  Returns True if it was applied."""
        successor = step(self.state, move)
        if successor is None:
            return False
        self.state = successor
        self.history.append(move)
        return True

    def restart(self) -> None:
        self.state = self.start
        self.history.clear()

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    @property
    def is_won(self) -> bool:
        return self.state.is_goal()
