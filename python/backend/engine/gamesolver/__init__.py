from backend.engine.gamesolver.solver import Predecessor, Solver

solve = Solver.solve

__all__ = ["Predecessor", "Solver", "solve"]
