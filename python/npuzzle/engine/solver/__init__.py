from npuzzle.engine.solver.solver import SolveResult, Solver

__all__ = ["SolveResult", "Solver"]
