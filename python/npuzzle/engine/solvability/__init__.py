from npuzzle.engine.solvability.checker import count_inversions, is_solvable, parity

__all__ = ["count_inversions", "is_solvable", "parity"]
