from backend.models.board import Board, Direction
from backend.models.counter import CounterPuzzle, Step

__all__ = ["Board", "CounterPuzzle", "Direction", "Step"]
