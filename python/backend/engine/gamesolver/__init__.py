from backend.engine.gamesolver.solver import SolveStats, Solver

__all__ = ["SolveStats", "Solver"]
