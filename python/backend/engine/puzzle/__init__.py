from backend.engine.puzzle.puzzle import M, Puzzle

__all__ = ["M", "Puzzle"]
